################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for ViewFrame and TickReport."""

from __future__ import annotations

import json

import numpy as np
import pytest

from oasis_skyview.sensors.sensor_types.attitude import Attitude
from oasis_skyview.sensors.sensor_types.view_frame import TickReport
from oasis_skyview.sensors.sensor_types.view_frame import ViewFrame


def test_view_frame_coerces_vectors() -> None:
    """Sequences are coerced to float64 arrays of shape (3,)."""
    frame: ViewFrame = ViewFrame(direction=[1, 0, 0], up=(0, 0, 1))
    assert frame.direction.dtype == np.float64
    assert frame.up.shape == (3,)


def test_view_frame_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        ViewFrame(direction=[1.0, 0.0], up=[0.0, 0.0, 1.0])


def test_tick_report_as_dict_is_json_serializable() -> None:
    """as_dict flattens the frame next to the attitude."""
    report: TickReport = TickReport(
        attitude=Attitude(roll=0.1, pitch=-0.2),
        coefficient=0.05,
        reference_angle_deg=5.7,
        frame=ViewFrame(direction=[1.0, 0.0, 0.0], up=[0.0, 0.0, 1.0]),
    )
    payload: dict[str, object] = report.as_dict()
    json.dumps(payload)
    assert payload["direction"] == [1.0, 0.0, 0.0]
    assert payload["attitude"] == {"roll": 0.1, "pitch": -0.2, "azimuth": None}
