################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Contracts for the collaborators that surround the sensor fusion core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np
from numpy.typing import NDArray


_FLOAT_ARRAY = NDArray[np.float64]


@dataclass(frozen=True)
class Location:
    """Observer location on the Earth.

    Attributes:
        latitude_deg: Geodetic latitude in degrees, north positive
        longitude_deg: Longitude in degrees, east positive
        altitude_m: Height above the ellipsoid in meters
    """

    latitude_deg: float
    longitude_deg: float
    altitude_m: float


class ViewControl(Protocol):
    """Renderer-side view owned outside the fusion core.

    The view lives in an external reference frame (for a sky view, an
    equatorial frame). The core works in the local horizontal frame, with
    +z at the zenith, and converts through local_to_reference() and
    reference_to_local().
    """

    def get_fov_deg(self) -> float: ...

    def get_view_direction(self) -> _FLOAT_ARRAY: ...

    def set_view_direction(self, direction: _FLOAT_ARRAY) -> None: ...

    def get_up_vector(self) -> _FLOAT_ARRAY: ...

    def set_up_vector(self, up: _FLOAT_ARRAY) -> None: ...

    def set_reference_angle_deg(self, angle_deg: float) -> None: ...

    def local_to_reference(self, vector: _FLOAT_ARRAY) -> _FLOAT_ARRAY: ...

    def reference_to_local(self, vector: _FLOAT_ARRAY) -> _FLOAT_ARRAY: ...


class LocationClock(Protocol):
    """Source of the current observer location and date."""

    def get_current_location(self) -> Location: ...

    def get_current_year(self) -> float: ...
