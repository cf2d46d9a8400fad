################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Screen rotation states and coarse hardware orientation readings."""

from __future__ import annotations

import enum
from typing import Optional


class ScreenOrientation(enum.Enum):
    """Screen rotation in 90 degree steps.

    The value is the rotation in degrees. Transitions are discrete, there is
    no interpolation between states.
    """

    ROT_0 = 0
    ROT_90 = 90
    ROT_180 = 180
    ROT_270 = 270

    @property
    def degrees(self) -> int:
        return int(self.value)

    @classmethod
    def from_degrees(cls, degrees: int) -> ScreenOrientation:
        """Return the orientation for a multiple of 90 degrees.

        Angles outside [0, 360) are wrapped first.
        """
        if isinstance(degrees, bool) or not isinstance(degrees, int):
            raise ValueError("degrees must be an int")
        wrapped: int = degrees % 360
        if wrapped % 90 != 0:
            raise ValueError(f"degrees must be a multiple of 90, got {degrees}")
        return cls(wrapped)


class RawOrientation(enum.Enum):
    """Coarse orientation reported by the hardware orientation sensor."""

    UNDEFINED = "undefined"
    TOP_UP = "top_up"
    TOP_DOWN = "top_down"
    LEFT_UP = "left_up"
    RIGHT_UP = "right_up"
    FACE_UP = "face_up"
    FACE_DOWN = "face_down"

    def screen_orientation(self) -> Optional[ScreenOrientation]:
        """Map to a screen rotation, or None when the reading carries none.

        Face-up, face-down and undefined readings happen when the device lies
        flat, where the screen rotation is ambiguous.
        """
        return _SCREEN_ORIENTATIONS.get(self)


_SCREEN_ORIENTATIONS: dict[RawOrientation, ScreenOrientation] = {
    RawOrientation.TOP_UP: ScreenOrientation.ROT_0,
    RawOrientation.LEFT_UP: ScreenOrientation.ROT_90,
    RawOrientation.TOP_DOWN: ScreenOrientation.ROT_180,
    RawOrientation.RIGHT_UP: ScreenOrientation.ROT_270,
}
