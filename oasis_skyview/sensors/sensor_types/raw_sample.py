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
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class RawSample:
    """Raw 3-axis sample delivered by a platform sensor.

    Data contract:
        x, y, z:
            Components in the device frame. Acceleration is in m/s^2, the
            magnetic field is in device-native units (only its direction is
            used, so the scale does not matter)

    Determinism and edge cases:
        - Samples are immutable once created
        - Non-finite components are rejected by validate()
    """

    x: float
    y: float
    z: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> RawSample:
        """Build a sample from a length-3 sequence."""
        if len(values) != 3:
            raise ValueError("sample must have length 3")
        sample: RawSample = cls(
            x=float(values[0]), y=float(values[1]), z=float(values[2])
        )
        sample.validate()
        return sample

    def validate(self) -> None:
        """Validate sample fields and raise ValueError on failure."""
        for name, value in (("x", self.x), ("y", self.y), ("z", self.z)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a float")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite")

    def scaled(self, factor: float) -> RawSample:
        """Return the sample with every component multiplied by factor."""
        return RawSample(x=self.x * factor, y=self.y * factor, z=self.z * factor)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {"x": self.x, "y": self.y, "z": self.z}
