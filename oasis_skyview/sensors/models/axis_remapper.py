################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Device-to-screen axis remapping strategies keyed by platform capability."""

from __future__ import annotations

from typing import Mapping
from typing import Protocol

from oasis_skyview.sensors.sensor_types.screen_orientation import ScreenOrientation


# Capability tag for platforms without a hardware orientation signal
PLATFORM_NONE: str = "none"

# Capability tag for platforms reporting the display rotation (Android)
PLATFORM_ANDROID: str = "android"

# Capability tag for platforms reporting an orientation sensor (Ubuntu Touch)
PLATFORM_UBUNTU_TOUCH: str = "ubuntu_touch"


# Row-major 2x2 matrix applied to the (x, y) pair
AxisTable = Mapping[ScreenOrientation, tuple[tuple[int, int], tuple[int, int]]]


_IDENTITY: tuple[tuple[int, int], tuple[int, int]] = ((1, 0), (0, 1))
_NEGATE: tuple[tuple[int, int], tuple[int, int]] = ((-1, 0), (0, -1))

# (x', y') = (-y, x)
_QUARTER_CCW: tuple[tuple[int, int], tuple[int, int]] = ((0, -1), (1, 0))

# (x', y') = (y, -x)
_QUARTER_CW: tuple[tuple[int, int], tuple[int, int]] = ((0, 1), (-1, 0))


# The two platforms use opposite signs for 90 and 270 degrees. Each entry was
# observed on hardware and is kept as a literal; verify new devices against
# these tables rather than deriving a formula
ANDROID_AXIS_TABLE: AxisTable = {
    ScreenOrientation.ROT_0: _IDENTITY,
    ScreenOrientation.ROT_90: _QUARTER_CCW,
    ScreenOrientation.ROT_180: _NEGATE,
    ScreenOrientation.ROT_270: _QUARTER_CW,
}

UBUNTU_TOUCH_AXIS_TABLE: AxisTable = {
    ScreenOrientation.ROT_0: _IDENTITY,
    ScreenOrientation.ROT_90: _QUARTER_CW,
    ScreenOrientation.ROT_180: _NEGATE,
    ScreenOrientation.ROT_270: _QUARTER_CCW,
}


class AxisRemapper(Protocol):
    """Maps device-relative sample axes onto screen-relative axes."""

    def apply(
        self, x: float, y: float, z: float, orientation: ScreenOrientation
    ) -> tuple[float, float, float]: ...


class IdentityRemapper:
    """Remapper for platforms with no hardware orientation signal."""

    def apply(
        self, x: float, y: float, z: float, orientation: ScreenOrientation
    ) -> tuple[float, float, float]:
        return x, y, z


class TableRemapper:
    """Remapper driven by an explicit per-orientation lookup table.

    Only the x/y pair is remapped, z passes through unchanged.
    """

    def __init__(self, table: AxisTable) -> None:
        missing: list[ScreenOrientation] = [
            orientation for orientation in ScreenOrientation if orientation not in table
        ]
        if missing:
            raise ValueError(f"axis table missing {missing[0].name}")
        self._table: dict[
            ScreenOrientation, tuple[tuple[int, int], tuple[int, int]]
        ] = dict(table)

    def apply(
        self, x: float, y: float, z: float, orientation: ScreenOrientation
    ) -> tuple[float, float, float]:
        row_x, row_y = self._table[orientation]
        x_out: float = row_x[0] * x + row_x[1] * y
        y_out: float = row_y[0] * x + row_y[1] * y
        return x_out, y_out, z


_REGISTRY: dict[str, AxisRemapper] = {
    PLATFORM_NONE: IdentityRemapper(),
    PLATFORM_ANDROID: TableRemapper(ANDROID_AXIS_TABLE),
    PLATFORM_UBUNTU_TOUCH: TableRemapper(UBUNTU_TOUCH_AXIS_TABLE),
}


def register_remapper(platform: str, remapper: AxisRemapper) -> None:
    """Register or replace the remap strategy for a platform tag."""
    if not platform:
        raise ValueError("platform must be non-empty")
    _REGISTRY[platform] = remapper


def remapper_for_platform(platform: str) -> AxisRemapper:
    """Return the remap strategy registered for a platform tag."""
    try:
        return _REGISTRY[platform]
    except KeyError:
        raise ValueError(f"unknown platform: {platform}") from None


def known_platforms() -> list[str]:
    return sorted(_REGISTRY.keys())
