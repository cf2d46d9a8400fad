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
from typing import Mapping

from oasis_skyview.sensors.models.axis_remapper import PLATFORM_NONE


# Units: degrees. Meaning: field of view at which blending reaches coef_wide
FOV_REFERENCE_DEG: float = 130.0

# Units: unitless. Meaning: blending coefficient for a fully zoomed-in view
COEF_NARROW: float = 0.01

# Units: unitless. Meaning: blending coefficient at or above the reference FOV
COEF_WIDE: float = 0.1

# Units: m/s^2. Meaning: standard gravity used to normalize acceleration
STANDARD_GRAVITY_MPS2: float = 9.80665


@dataclass(frozen=True, slots=True)
class SensorsParams:
    """Configuration parameter definitions for the sensor fusion core.

    Responsibility:
        Hold the calibrated constants of the adaptive low-pass filter and the
        platform capability tag that selects the axis remap strategy.

    Data contract:
        - platform: axis remap capability tag, see axis_remapper.
        - fov_reference_deg: FOV in degrees at which coef_wide is reached.
        - coef_narrow: blending coefficient as FOV approaches 0, in [0, 1].
        - coef_wide: blending coefficient at fov_reference_deg, in [0, 1].
        - standard_gravity_mps2: acceleration normalization, m/s^2.
        - declination_deg_fallback: declination used when the geomagnetic
          lookup fails, degrees.

    Determinism and edge cases:
        - The default coefficients (0.01, 0.1) and reference FOV (130 deg)
          are calibrated values. Narrow views get heavy smoothing, wide views
          a faster response.
        - validate() rejects coef_narrow > coef_wide and non-positive scales.
    """

    platform: str
    fov_reference_deg: float
    coef_narrow: float
    coef_wide: float
    standard_gravity_mps2: float
    declination_deg_fallback: float

    @staticmethod
    def defaults() -> SensorsParams:
        """Return a stable default parameter set."""
        params: SensorsParams = SensorsParams(
            platform=PLATFORM_NONE,
            fov_reference_deg=FOV_REFERENCE_DEG,
            coef_narrow=COEF_NARROW,
            coef_wide=COEF_WIDE,
            standard_gravity_mps2=STANDARD_GRAVITY_MPS2,
            declination_deg_fallback=0.0,
        )
        params.validate()
        return params

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> SensorsParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise ValueError("params must be a mapping")
        unknown_keys: list[str] = sorted(set(params.keys()) - set(cls._field_order()))
        if unknown_keys:
            raise ValueError(f"unknown parameter: {unknown_keys[0]}")
        defaults: SensorsParams = cls.defaults()
        result: SensorsParams = cls(
            platform=cls._as_str(
                "platform", params.get("platform", defaults.platform)
            ),
            fov_reference_deg=cls._as_float(
                "fov_reference_deg",
                params.get("fov_reference_deg", defaults.fov_reference_deg),
            ),
            coef_narrow=cls._as_float(
                "coef_narrow", params.get("coef_narrow", defaults.coef_narrow)
            ),
            coef_wide=cls._as_float(
                "coef_wide", params.get("coef_wide", defaults.coef_wide)
            ),
            standard_gravity_mps2=cls._as_float(
                "standard_gravity_mps2",
                params.get("standard_gravity_mps2", defaults.standard_gravity_mps2),
            ),
            declination_deg_fallback=cls._as_float(
                "declination_deg_fallback",
                params.get(
                    "declination_deg_fallback", defaults.declination_deg_fallback
                ),
            ),
        )
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameters and raise ValueError on failure."""
        if not self.platform:
            raise ValueError("platform must be non-empty")
        self._validate_finite("fov_reference_deg", self.fov_reference_deg)
        if self.fov_reference_deg <= 0.0:
            raise ValueError("fov_reference_deg must be > 0")
        self._validate_unit_interval("coef_narrow", self.coef_narrow)
        self._validate_unit_interval("coef_wide", self.coef_wide)
        if self.coef_narrow > self.coef_wide:
            raise ValueError("coef_narrow must be <= coef_wide")
        self._validate_finite("standard_gravity_mps2", self.standard_gravity_mps2)
        if self.standard_gravity_mps2 <= 0.0:
            raise ValueError("standard_gravity_mps2 must be > 0")
        self._validate_finite(
            "declination_deg_fallback", self.declination_deg_fallback
        )

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "platform": self.platform,
            "fov_reference_deg": self.fov_reference_deg,
            "coef_narrow": self.coef_narrow,
            "coef_wide": self.coef_wide,
            "standard_gravity_mps2": self.standard_gravity_mps2,
            "declination_deg_fallback": self.declination_deg_fallback,
        }

    @staticmethod
    def _as_float(name: str, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a float")
        return float(value)

    @staticmethod
    def _as_str(name: str, value: object) -> str:
        if not isinstance(value, str):
            raise ValueError(f"{name} must be a string")
        return value

    @staticmethod
    def _validate_finite(name: str, value: float) -> None:
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite")

    @staticmethod
    def _validate_unit_interval(name: str, value: float) -> None:
        if not (0.0 <= value <= 1.0):
            raise ValueError(f"{name} must be in [0, 1]")

    @staticmethod
    def _field_order() -> list[str]:
        return [
            "platform",
            "fov_reference_deg",
            "coef_narrow",
            "coef_wide",
            "standard_gravity_mps2",
            "declination_deg_fallback",
        ]
