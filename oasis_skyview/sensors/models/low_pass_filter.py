################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Adaptive low-pass filter whose response follows the view field of view."""

from __future__ import annotations

from dataclasses import dataclass

from oasis_skyview.sensors.config.sensors_params import COEF_NARROW
from oasis_skyview.sensors.config.sensors_params import COEF_WIDE
from oasis_skyview.sensors.config.sensors_params import FOV_REFERENCE_DEG
from oasis_skyview.sensors.config.sensors_params import SensorsParams
from oasis_skyview.sensors.math_utils.spherical import Spherical
from oasis_skyview.sensors.sensor_types.raw_sample import RawSample


def averaging_coefficient(
    fov_deg: float,
    first_measure: bool,
    coef_narrow: float = COEF_NARROW,
    coef_wide: float = COEF_WIDE,
    fov_reference_deg: float = FOV_REFERENCE_DEG,
) -> float:
    """Return the blending coefficient for the current field of view.

    A narrow (zoomed) view magnifies jitter, so it blends slowly; a wide view
    tolerates a twitchier response. The first measure snaps to the sample.
    """
    if first_measure:
        return 1.0
    return Spherical.mix(coef_narrow, coef_wide, min(fov_deg / fov_reference_deg, 1.0))


@dataclass
class FilterState:
    """Mutable state for the adaptive low-pass filter."""

    # Smoothed acceleration, in units of standard gravity
    accel_x: float = 0.0
    accel_y: float = 0.0
    accel_z: float = 0.0

    # Smoothed magnetic field, device-native units
    mag_x: float = 0.0
    mag_y: float = 0.0
    mag_z: float = 0.0

    # True until the first tick after a reset has run
    first_measure: bool = True

    def accel(self) -> tuple[float, float, float]:
        return self.accel_x, self.accel_y, self.accel_z

    def mag(self) -> tuple[float, float, float]:
        return self.mag_x, self.mag_y, self.mag_z


class LowPassFilter:
    """Smooths the six acceleration and magnetic channels.

    Each tick draws one coefficient from next_coefficient() and applies it to
    every channel that has a sample this tick.
    """

    def __init__(self, params: SensorsParams) -> None:
        self._params: SensorsParams = params
        self._state: FilterState = FilterState()

    @property
    def state(self) -> FilterState:
        """Return the mutable filter state."""
        return self._state

    def reset(self) -> None:
        """Re-arm the first-measure bypass."""
        self._state.first_measure = True

    def next_coefficient(self, fov_deg: float) -> float:
        """Return this tick's coefficient and clear the first-measure flag."""
        coefficient: float = averaging_coefficient(
            fov_deg,
            self._state.first_measure,
            coef_narrow=self._params.coef_narrow,
            coef_wide=self._params.coef_wide,
            fov_reference_deg=self._params.fov_reference_deg,
        )
        self._state.first_measure = False
        return coefficient

    def blend_accel(
        self, sample: RawSample, coefficient: float
    ) -> tuple[float, float, float]:
        """Blend an acceleration sample in m/s^2, returning the smoothed g."""
        g: RawSample = sample.scaled(1.0 / self._params.standard_gravity_mps2)
        state: FilterState = self._state
        state.accel_x = Spherical.mix(state.accel_x, g.x, coefficient)
        state.accel_y = Spherical.mix(state.accel_y, g.y, coefficient)
        state.accel_z = Spherical.mix(state.accel_z, g.z, coefficient)
        return state.accel()

    def blend_mag(
        self, sample: RawSample, coefficient: float
    ) -> tuple[float, float, float]:
        """Blend a magnetic field sample, returning the smoothed field."""
        state: FilterState = self._state
        state.mag_x = Spherical.mix(state.mag_x, sample.x, coefficient)
        state.mag_y = Spherical.mix(state.mag_y, sample.y, coefficient)
        state.mag_z = Spherical.mix(state.mag_z, sample.z, coefficient)
        return state.mag()
