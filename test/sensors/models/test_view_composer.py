################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for writing an attitude to the view."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_skyview.sensors.models.view_composer import ViewComposer
from oasis_skyview.sensors.models.view_composer import heading_deg
from oasis_skyview.sensors.sensor_types.attitude import Attitude
from oasis_skyview.sensors.view_state import ViewState


# Reference frame tilted a quarter turn about +x
ROT_X_90: np.ndarray = np.array(
    [[1.0, 0.0, 0.0], [0.0, 0.0, -1.0], [0.0, 1.0, 0.0]], dtype=np.float64
)

# Reference frame turned a quarter turn about +z
ROT_Z_90: np.ndarray = np.array(
    [[0.0, -1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64
)


def test_level_attitude_keeps_vertical_up() -> None:
    view = ViewState()
    frame = ViewComposer(view).apply(Attitude(roll=0.0, pitch=0.0))

    np.testing.assert_allclose(frame.direction, [1.0, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(frame.up, [0.0, 0.0, 1.0], atol=1e-12)
    assert view.reference_angle_deg == 0.0


def test_roll_tilts_up_vector_and_sets_reference_angle() -> None:
    view = ViewState()
    frame = ViewComposer(view).apply(Attitude(roll=math.pi / 2.0, pitch=0.0))

    np.testing.assert_allclose(frame.up, [0.0, -1.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(view.get_up_vector(), frame.up)
    assert view.reference_angle_deg == pytest.approx(90.0)


def test_longitude_kept_without_azimuth() -> None:
    view = ViewState(direction=(0.0, 1.0, 0.0))
    frame = ViewComposer(view).apply(Attitude(roll=0.0, pitch=0.3))

    np.testing.assert_allclose(
        frame.direction, [0.0, math.cos(0.3), math.sin(0.3)], atol=1e-12
    )
    np.testing.assert_allclose(view.get_view_direction(), frame.direction)


def test_azimuth_replaces_longitude() -> None:
    view = ViewState()
    frame = ViewComposer(view).apply(
        Attitude(roll=0.0, pitch=0.0, azimuth=math.pi / 2.0)
    )

    np.testing.assert_allclose(frame.direction, [0.0, 1.0, 0.0], atol=1e-12)


def test_vectors_converted_to_reference_frame() -> None:
    view = ViewState(direction=(0.0, 1.0, 0.0), local_to_reference=ROT_Z_90)
    frame = ViewComposer(view).apply(Attitude(roll=0.0, pitch=0.0))

    # Reference +y is local +x, so the longitude read back is 0
    np.testing.assert_allclose(frame.direction, [0.0, 1.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(frame.up, [0.0, 0.0, 1.0], atol=1e-12)


def test_reset_restores_canonical_up() -> None:
    view = ViewState(local_to_reference=ROT_X_90)
    composer = ViewComposer(view)
    composer.apply(Attitude(roll=0.7, pitch=0.2))

    composer.reset()

    np.testing.assert_allclose(view.get_up_vector(), [0.0, -1.0, 0.0], atol=1e-12)
    assert view.reference_angle_deg == 0.0


def test_heading_deg_wraps() -> None:
    assert heading_deg(Attitude(0.0, 0.0, azimuth=-math.pi / 2.0)) == pytest.approx(
        270.0
    )
    assert heading_deg(Attitude(0.0, 0.0, azimuth=math.pi)) == pytest.approx(180.0)


def test_heading_deg_requires_azimuth() -> None:
    with pytest.raises(ValueError):
        heading_deg(Attitude(0.0, 0.0))
