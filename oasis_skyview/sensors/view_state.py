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
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_skyview.sensors.sensor_types.view_frame import ViewFrame


_FLOAT_ARRAY = NDArray[np.float64]

# Units: unitless. Meaning: tolerance on R^T R - I for the frame rotation
ORTHONORMAL_TOL: float = 1e-9


class ViewState:
    """In-memory view implementing the ViewControl contract.

    The local-to-reference conversion is a fixed rotation matrix. Identity
    makes the reference frame coincide with the local horizontal frame, which
    is what replays and tests usually want.
    """

    def __init__(
        self,
        fov_deg: float = 60.0,
        direction: Sequence[float] = (1.0, 0.0, 0.0),
        up: Sequence[float] = (0.0, 0.0, 1.0),
        local_to_reference: Optional[_FLOAT_ARRAY] = None,
    ) -> None:
        rotation: _FLOAT_ARRAY = (
            np.eye(3, dtype=np.float64)
            if local_to_reference is None
            else np.asarray(local_to_reference, dtype=np.float64)
        )
        if rotation.shape != (3, 3):
            raise ValueError(f"local_to_reference must be 3x3, got {rotation.shape}")
        if not np.allclose(rotation.T @ rotation, np.eye(3), atol=ORTHONORMAL_TOL):
            raise ValueError("local_to_reference must be orthonormal")

        self._rotation: _FLOAT_ARRAY = rotation
        self._fov_deg: float = 0.0
        self.set_fov_deg(fov_deg)
        self._direction: _FLOAT_ARRAY = np.asarray(direction, dtype=np.float64)
        self._up: _FLOAT_ARRAY = np.asarray(up, dtype=np.float64)
        self._reference_angle_deg: float = 0.0

    @property
    def reference_angle_deg(self) -> float:
        return self._reference_angle_deg

    def frame(self) -> ViewFrame:
        return ViewFrame(direction=self._direction, up=self._up)

    def set_fov_deg(self, fov_deg: float) -> None:
        if not math.isfinite(fov_deg) or fov_deg <= 0.0:
            raise ValueError("fov_deg must be finite and > 0")
        self._fov_deg = float(fov_deg)

    def get_fov_deg(self) -> float:
        return self._fov_deg

    def get_view_direction(self) -> _FLOAT_ARRAY:
        return self._direction.copy()

    def set_view_direction(self, direction: _FLOAT_ARRAY) -> None:
        self._direction = np.asarray(direction, dtype=np.float64).copy()

    def get_up_vector(self) -> _FLOAT_ARRAY:
        return self._up.copy()

    def set_up_vector(self, up: _FLOAT_ARRAY) -> None:
        self._up = np.asarray(up, dtype=np.float64).copy()

    def set_reference_angle_deg(self, angle_deg: float) -> None:
        self._reference_angle_deg = float(angle_deg)

    def local_to_reference(self, vector: _FLOAT_ARRAY) -> _FLOAT_ARRAY:
        return self._rotation @ np.asarray(vector, dtype=np.float64)

    def reference_to_local(self, vector: _FLOAT_ARRAY) -> _FLOAT_ARRAY:
        return self._rotation.T @ np.asarray(vector, dtype=np.float64)
