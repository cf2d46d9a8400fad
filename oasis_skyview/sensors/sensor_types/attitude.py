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
from typing import Optional


@dataclass(frozen=True, slots=True)
class Attitude:
    """Device attitude derived for a single update tick.

    Data contract:
        roll:
            Rotation about the look axis in radians, from gravity
        pitch:
            Tilt about the lateral axis in radians, from gravity
        azimuth:
            Declination-corrected compass heading in radians, or None when no
            magnetometer reading was available this tick
    """

    roll: float
    pitch: float
    azimuth: Optional[float] = None

    @property
    def has_azimuth(self) -> bool:
        return self.azimuth is not None

    @property
    def roll_deg(self) -> float:
        return math.degrees(self.roll)

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "roll": self.roll,
            "pitch": self.pitch,
            "azimuth": self.azimuth,
        }
