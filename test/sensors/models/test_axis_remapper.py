################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the platform axis remap strategies."""

from __future__ import annotations

import pytest

from oasis_skyview.sensors.models.axis_remapper import ANDROID_AXIS_TABLE
from oasis_skyview.sensors.models.axis_remapper import PLATFORM_ANDROID
from oasis_skyview.sensors.models.axis_remapper import PLATFORM_NONE
from oasis_skyview.sensors.models.axis_remapper import PLATFORM_UBUNTU_TOUCH
from oasis_skyview.sensors.models.axis_remapper import IdentityRemapper
from oasis_skyview.sensors.models.axis_remapper import TableRemapper
from oasis_skyview.sensors.models.axis_remapper import known_platforms
from oasis_skyview.sensors.models.axis_remapper import register_remapper
from oasis_skyview.sensors.models.axis_remapper import remapper_for_platform
from oasis_skyview.sensors.sensor_types.screen_orientation import ScreenOrientation


SAMPLE: tuple[float, float, float] = (1.0, 2.0, 3.0)


def test_identity_for_platform_without_orientation() -> None:
    remapper = remapper_for_platform(PLATFORM_NONE)
    for orientation in ScreenOrientation:
        assert remapper.apply(*SAMPLE, orientation) == SAMPLE


def test_android_table() -> None:
    remapper = remapper_for_platform(PLATFORM_ANDROID)
    assert remapper.apply(*SAMPLE, ScreenOrientation.ROT_0) == (1.0, 2.0, 3.0)
    assert remapper.apply(*SAMPLE, ScreenOrientation.ROT_90) == (-2.0, 1.0, 3.0)
    assert remapper.apply(*SAMPLE, ScreenOrientation.ROT_180) == (-1.0, -2.0, 3.0)
    assert remapper.apply(*SAMPLE, ScreenOrientation.ROT_270) == (2.0, -1.0, 3.0)


def test_ubuntu_touch_table() -> None:
    remapper = remapper_for_platform(PLATFORM_UBUNTU_TOUCH)
    assert remapper.apply(*SAMPLE, ScreenOrientation.ROT_0) == (1.0, 2.0, 3.0)
    assert remapper.apply(*SAMPLE, ScreenOrientation.ROT_90) == (2.0, -1.0, 3.0)
    assert remapper.apply(*SAMPLE, ScreenOrientation.ROT_180) == (-1.0, -2.0, 3.0)
    assert remapper.apply(*SAMPLE, ScreenOrientation.ROT_270) == (-2.0, 1.0, 3.0)


@pytest.mark.parametrize("platform", [PLATFORM_ANDROID, PLATFORM_UBUNTU_TOUCH])
def test_opposite_rotations_round_trip(platform: str) -> None:
    remapper = remapper_for_platform(platform)
    pairs = (
        (ScreenOrientation.ROT_90, ScreenOrientation.ROT_270),
        (ScreenOrientation.ROT_270, ScreenOrientation.ROT_90),
        (ScreenOrientation.ROT_180, ScreenOrientation.ROT_180),
    )
    for first, second in pairs:
        once = remapper.apply(0.3, -1.7, 9.8, first)
        assert remapper.apply(*once, second) == (0.3, -1.7, 9.8)


def test_unknown_platform_rejected() -> None:
    with pytest.raises(ValueError):
        remapper_for_platform("not_a_platform")


def test_register_platform_strategy() -> None:
    class SwapRemapper:
        def apply(
            self, x: float, y: float, z: float, orientation: ScreenOrientation
        ) -> tuple[float, float, float]:
            return y, x, z

    register_remapper("test_swap", SwapRemapper())
    assert "test_swap" in known_platforms()
    assert remapper_for_platform("test_swap").apply(
        *SAMPLE, ScreenOrientation.ROT_0
    ) == (2.0, 1.0, 3.0)


def test_register_rejects_empty_tag() -> None:
    with pytest.raises(ValueError):
        register_remapper("", IdentityRemapper())


def test_table_remapper_requires_every_orientation() -> None:
    partial = {
        orientation: matrix
        for orientation, matrix in ANDROID_AXIS_TABLE.items()
        if orientation != ScreenOrientation.ROT_270
    }
    with pytest.raises(ValueError):
        TableRemapper(partial)
