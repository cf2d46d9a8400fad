################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Magnetic declination lookup with a logged fallback."""

from __future__ import annotations

import logging
import math
from typing import Optional
from typing import Protocol

from oasis_skyview.sensors.sensors_interfaces import Location
from oasis_skyview.sensors.sensors_interfaces import LocationClock


_LOG: logging.Logger = logging.getLogger(__name__)


class DeclinationLookupError(Exception):
    """Raised by a geomagnetic model that cannot produce a declination."""


class DeclinationProvider(Protocol):
    """Geomagnetic model returning the declination in degrees, east positive."""

    def __call__(
        self,
        latitude_deg: float,
        longitude_deg: float,
        altitude_m: float,
        year: float,
    ) -> float: ...


class FixedDeclination:
    """Provider returning a constant declination, e.g. from a chart."""

    def __init__(self, declination_deg: float) -> None:
        if not math.isfinite(declination_deg):
            raise ValueError("declination_deg must be finite")
        self._declination_deg: float = float(declination_deg)

    def __call__(
        self,
        latitude_deg: float,
        longitude_deg: float,
        altitude_m: float,
        year: float,
    ) -> float:
        return self._declination_deg


class DeclinationModel:
    """Resolves the declination once per enable.

    Lookup failures of any kind never propagate: the fallback (0 by default)
    is used and a warning is logged, leaving the azimuth computable but
    uncorrected.
    """

    def __init__(
        self,
        provider: Optional[DeclinationProvider],
        location_clock: Optional[LocationClock],
        fallback_deg: float = 0.0,
    ) -> None:
        self._provider: Optional[DeclinationProvider] = provider
        self._location_clock: Optional[LocationClock] = location_clock
        self._fallback_rad: float = math.radians(fallback_deg)

    def lookup_rad(self) -> float:
        """Query the provider and return the declination in radians."""
        if self._provider is None or self._location_clock is None:
            _LOG.debug("No geomagnetic model configured, declination not corrected")
            return self._fallback_rad

        try:
            location: Location = self._location_clock.get_current_location()
            year: float = self._location_clock.get_current_year()
            declination_deg: float = float(
                self._provider(
                    location.latitude_deg,
                    location.longitude_deg,
                    location.altitude_m,
                    year,
                )
            )
        except Exception as exc:
            _LOG.warning("Magnetic declination lookup failed: %s", exc)
            _LOG.warning("Magnetic declination correction will not function correctly")
            return self._fallback_rad

        if not math.isfinite(declination_deg):
            _LOG.warning("Magnetic declination lookup returned %s", declination_deg)
            return self._fallback_rad

        _LOG.info("Magnetic declination: %.3f deg", declination_deg)
        return math.radians(declination_deg)
