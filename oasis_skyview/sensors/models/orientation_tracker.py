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

import logging
from typing import Optional

from oasis_skyview.sensors.sensor_types.screen_orientation import RawOrientation
from oasis_skyview.sensors.sensor_types.screen_orientation import ScreenOrientation


_LOG: logging.Logger = logging.getLogger(__name__)


class OrientationTracker:
    """Holds the current screen rotation from discrete orientation events.

    The tracker is a free-running level: it changes only when a known reading
    maps to a rotation different from the current one. Readings taken while
    the device lies flat (face up/down) or undefined readings are ignored so
    the screen does not flip spuriously.
    """

    def __init__(
        self, initial: ScreenOrientation = ScreenOrientation.ROT_0
    ) -> None:
        self._orientation: ScreenOrientation = initial

    @property
    def orientation(self) -> ScreenOrientation:
        return self._orientation

    def on_orientation_event(self, raw: RawOrientation) -> ScreenOrientation:
        """Apply a hardware orientation reading and return the current state."""
        mapped: Optional[ScreenOrientation] = raw.screen_orientation()
        if mapped is None:
            _LOG.debug("Ignoring orientation reading %s", raw.value)
            return self._orientation
        self.set_orientation(mapped)
        return self._orientation

    def set_orientation(self, orientation: ScreenOrientation) -> None:
        """Set the rotation directly, for platforms reporting display rotation."""
        if orientation == self._orientation:
            return
        _LOG.debug(
            "Screen orientation %d -> %d",
            self._orientation.degrees,
            orientation.degrees,
        )
        self._orientation = orientation
