################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from oasis_skyview.sensors.math_utils.spherical import Spherical
from oasis_skyview.sensors.sensor_types.attitude import Attitude
from oasis_skyview.sensors.sensor_types.view_frame import ViewFrame
from oasis_skyview.sensors.sensors_interfaces import ViewControl


_FLOAT_ARRAY = NDArray[np.float64]

# Zenith in the local horizontal frame
LOCAL_UP: tuple[float, float, float] = (0.0, 0.0, 1.0)


class ViewComposer:
    """Writes an attitude to the view as direction, up vector and text angle.

    Block diagram:

        view direction (reference) -> [reference_to_local] -> (lng, lat)
                                                                |
        attitude.pitch ---------------------------------> lat <-+
        attitude.azimuth (if any) ----------------------> lng <-+
                                                                |
                                   [sphe_to_rect] -> [local_to_reference]
                                                                |
                                                                v
                                                      set_view_direction

        LOCAL_UP -> [rotate by roll about sphe_to_rect(lng_prior, 0)]
                 -> [local_to_reference] -> set_up_vector

        degrees(roll) -> set_reference_angle_deg

    The up vector is built around the longitude read from the view before
    this tick. The longitude written to the direction comes from the
    magnetometer when available and is otherwise kept from the view.
    """

    def __init__(self, view: ViewControl) -> None:
        self._view: ViewControl = view

    def apply(self, attitude: Attitude) -> ViewFrame:
        """Write the attitude to the view and return the vectors written."""
        view: ViewControl = self._view

        view.set_reference_angle_deg(attitude.roll_deg)

        direction_local: _FLOAT_ARRAY = view.reference_to_local(
            view.get_view_direction()
        )
        lng, _ = Spherical.rect_to_sphe(direction_local)

        horizontal: _FLOAT_ARRAY = Spherical.sphe_to_rect(lng, 0.0)
        up_local: _FLOAT_ARRAY = Spherical.rotate_about_axis(
            LOCAL_UP, horizontal, attitude.roll
        )
        up: _FLOAT_ARRAY = view.local_to_reference(up_local)
        view.set_up_vector(up)

        heading: float = lng if attitude.azimuth is None else attitude.azimuth
        direction: _FLOAT_ARRAY = view.local_to_reference(
            Spherical.sphe_to_rect(heading, attitude.pitch)
        )
        view.set_view_direction(direction)

        return ViewFrame(direction=direction, up=up)

    def reset(self) -> None:
        """Restore the canonical vertical up vector and a zero text angle."""
        self._view.set_up_vector(
            self._view.local_to_reference(np.array(LOCAL_UP, dtype=np.float64))
        )
        self._view.set_reference_angle_deg(0.0)


def heading_deg(attitude: Attitude) -> float:
    """Return the azimuth wrapped to [0, 360) degrees."""
    if attitude.azimuth is None:
        raise ValueError("attitude has no azimuth")
    return math.degrees(attitude.azimuth) % 360.0
