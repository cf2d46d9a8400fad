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

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from oasis_skyview.sensors.sensor_types.attitude import Attitude


_FLOAT_ARRAY = NDArray[np.float64]


@dataclass(frozen=True)
class ViewFrame:
    """Look direction and up vector of the view, in the reference frame.

    Attributes:
        direction: Unit look direction
        up: Unit up vector
    """

    direction: _FLOAT_ARRAY
    up: _FLOAT_ARRAY

    def __post_init__(self) -> None:
        """Coerce array types and validate shapes."""
        object.__setattr__(self, "direction", _as_vector(self.direction, "direction"))
        object.__setattr__(self, "up", _as_vector(self.up, "up"))

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "direction": [float(value) for value in self.direction],
            "up": [float(value) for value in self.up],
        }


@dataclass(frozen=True)
class TickReport:
    """Outputs written to the view during one update tick.

    Attributes:
        attitude: Attitude derived this tick
        coefficient: Low-pass blending coefficient used this tick
        reference_angle_deg: Gravity-aligned text angle, degrees
        frame: View direction and up vector written to the view
    """

    attitude: Attitude
    coefficient: float
    reference_angle_deg: float
    frame: ViewFrame

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        payload: dict[str, object] = {
            "attitude": self.attitude.as_dict(),
            "coefficient": self.coefficient,
            "reference_angle_deg": self.reference_angle_deg,
        }
        payload.update(self.frame.as_dict())
        return payload


def _as_vector(value: object, name: str) -> _FLOAT_ARRAY:
    try:
        array: _FLOAT_ARRAY = np.asarray(value, dtype=np.float64).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be numeric") from exc
    if array.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {array.shape}")
    return array.copy()
