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
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


_FLOAT_ARRAY = NDArray[np.float64]


class Spherical:
    """Angle and vector helpers for the sensor fusion core.

    Responsibility:
        Provide the spherical/rectangular conversions and planar rotations
        used to turn an attitude into view vectors.

    Data contract:
        - Vectors are length-3 numpy arrays of float64.
        - Angles are radians.
        - Longitude is measured in the x/y plane from +x towards +y,
          latitude from the x/y plane towards +z.

    Equations:
        sphe_to_rect(lng, lat) = [cos(lat) cos(lng), cos(lat) sin(lng), sin(lat)]

        rect_to_sphe(v):
            lng = atan2(v_y, v_x)
            lat = asin(v_z / |v|)

        rot2d(a, b, angle):
            a' = a cos(angle) - b sin(angle)
            b' = a sin(angle) + b cos(angle)

        axis_rotation(u, angle) is the right-handed (Rodrigues) rotation
        about the unit axis u:
            R = cos(angle) I + sin(angle) [u]x + (1 - cos(angle)) u u^T

    Determinism and edge cases:
        - rect_to_sphe() and axis_rotation() reject zero-length vectors.
    """

    @staticmethod
    def mix(x: float, y: float, t: float) -> float:
        """Linear interpolation from x (t = 0) to y (t = 1)."""
        return x * (1.0 - t) + y * t

    @staticmethod
    def rot2d(a: float, b: float, angle: float) -> tuple[float, float]:
        """Rotate the planar pair (a, b) counterclockwise by angle."""
        cs: float = math.cos(angle)
        sn: float = math.sin(angle)
        return a * cs - b * sn, a * sn + b * cs

    @staticmethod
    def sphe_to_rect(lng: float, lat: float) -> _FLOAT_ARRAY:
        cos_lat: float = math.cos(lat)
        return np.array(
            [math.cos(lng) * cos_lat, math.sin(lng) * cos_lat, math.sin(lat)],
            dtype=np.float64,
        )

    @staticmethod
    def rect_to_sphe(vector: Sequence[float] | _FLOAT_ARRAY) -> tuple[float, float]:
        """Return (longitude, latitude) of a non-zero vector."""
        v: _FLOAT_ARRAY = Spherical._as_vector(vector, "vector")
        norm: float = float(np.linalg.norm(v))
        if norm <= 0.0:
            raise ValueError("vector must be non-zero")
        # Clamp guards asin against rounding just past +/-1
        sin_lat: float = max(-1.0, min(1.0, float(v[2]) / norm))
        return math.atan2(float(v[1]), float(v[0])), math.asin(sin_lat)

    @staticmethod
    def axis_rotation(
        axis: Sequence[float] | _FLOAT_ARRAY, angle: float
    ) -> _FLOAT_ARRAY:
        """Return the 3x3 right-handed rotation about axis by angle."""
        u: _FLOAT_ARRAY = Spherical._as_vector(axis, "axis")
        norm: float = float(np.linalg.norm(u))
        if norm <= 0.0:
            raise ValueError("axis must be non-zero")
        u = u / norm

        cs: float = math.cos(angle)
        sn: float = math.sin(angle)
        skew: _FLOAT_ARRAY = np.array(
            [
                [0.0, -u[2], u[1]],
                [u[2], 0.0, -u[0]],
                [-u[1], u[0], 0.0],
            ],
            dtype=np.float64,
        )
        return (
            cs * np.eye(3, dtype=np.float64) + sn * skew + (1.0 - cs) * np.outer(u, u)
        )

    @staticmethod
    def rotate_about_axis(
        vector: Sequence[float] | _FLOAT_ARRAY,
        axis: Sequence[float] | _FLOAT_ARRAY,
        angle: float,
    ) -> _FLOAT_ARRAY:
        """Rotate vector about axis by angle."""
        v: _FLOAT_ARRAY = Spherical._as_vector(vector, "vector")
        return Spherical.axis_rotation(axis, angle) @ v

    @staticmethod
    def _as_vector(value: Sequence[float] | _FLOAT_ARRAY, name: str) -> _FLOAT_ARRAY:
        array: _FLOAT_ARRAY = np.asarray(value, dtype=np.float64).reshape(-1)
        if array.shape != (3,):
            raise ValueError(f"{name} must have shape (3,), got {array.shape}")
        return array
