################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for spherical conversions and rotations."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_skyview.sensors.math_utils.spherical import Spherical


def test_mix_endpoints_and_midpoint() -> None:
    assert Spherical.mix(2.0, 4.0, 0.0) == 2.0
    assert Spherical.mix(2.0, 4.0, 1.0) == 4.0
    assert Spherical.mix(2.0, 4.0, 0.5) == pytest.approx(3.0)


def test_rot2d_quarter_turn() -> None:
    a, b = Spherical.rot2d(1.0, 0.0, math.pi / 2.0)
    assert a == pytest.approx(0.0, abs=1e-12)
    assert b == pytest.approx(1.0)


def test_sphe_to_rect_axes() -> None:
    np.testing.assert_allclose(Spherical.sphe_to_rect(0.0, 0.0), [1.0, 0.0, 0.0])
    np.testing.assert_allclose(
        Spherical.sphe_to_rect(math.pi / 2.0, 0.0), [0.0, 1.0, 0.0], atol=1e-12
    )
    np.testing.assert_allclose(
        Spherical.sphe_to_rect(1.3, math.pi / 2.0), [0.0, 0.0, 1.0], atol=1e-12
    )


def test_rect_to_sphe_inverts_sphe_to_rect() -> None:
    lng, lat = Spherical.rect_to_sphe(Spherical.sphe_to_rect(0.7, -0.3))
    assert lng == pytest.approx(0.7)
    assert lat == pytest.approx(-0.3)


def test_rect_to_sphe_ignores_length() -> None:
    lng, lat = Spherical.rect_to_sphe([0.0, 0.0, 2.0])
    assert lat == pytest.approx(math.pi / 2.0)
    lng, lat = Spherical.rect_to_sphe([0.0, -3.0, 0.0])
    assert lng == pytest.approx(-math.pi / 2.0)
    assert lat == pytest.approx(0.0)


def test_rect_to_sphe_rejects_zero_vector() -> None:
    with pytest.raises(ValueError):
        Spherical.rect_to_sphe([0.0, 0.0, 0.0])


def test_rotate_about_axis_is_right_handed() -> None:
    rotated = Spherical.rotate_about_axis(
        [0.0, 0.0, 1.0], [1.0, 0.0, 0.0], math.pi / 2.0
    )
    np.testing.assert_allclose(rotated, [0.0, -1.0, 0.0], atol=1e-12)


def test_axis_rotation_is_proper_rotation() -> None:
    rotation = Spherical.axis_rotation([1.0, 2.0, -0.5], 0.8)
    np.testing.assert_allclose(rotation.T @ rotation, np.eye(3), atol=1e-12)
    assert float(np.linalg.det(rotation)) == pytest.approx(1.0)


def test_axis_rotation_normalizes_axis() -> None:
    np.testing.assert_allclose(
        Spherical.axis_rotation([0.0, 0.0, 5.0], 0.4),
        Spherical.axis_rotation([0.0, 0.0, 1.0], 0.4),
    )


def test_axis_rotation_rejects_bad_axis() -> None:
    with pytest.raises(ValueError):
        Spherical.axis_rotation([0.0, 0.0, 0.0], 0.1)
    with pytest.raises(ValueError):
        Spherical.axis_rotation([1.0, 0.0], 0.1)
