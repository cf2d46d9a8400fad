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
import threading
from typing import Optional

from oasis_skyview.sensors.sensor_types.raw_sample import RawSample


_LOG: logging.Logger = logging.getLogger(__name__)


class SensorReading:
    """Latest-value slot for one sensor.

    Platform callbacks may publish from their own thread while the update
    tick reads from the render thread. The lock serializes both sides; the
    tick always sees a whole sample, never a torn one.
    """

    def __init__(self, name: str) -> None:
        self._name: str = name
        self._lock: threading.Lock = threading.Lock()
        self._active: bool = False
        self._reading: Optional[RawSample] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def active(self) -> bool:
        with self._lock:
            return self._active

    def set_active(self, active: bool) -> None:
        """Start or stop accepting samples, dropping any latched reading."""
        with self._lock:
            self._active = active
            self._reading = None

    def publish(self, sample: RawSample) -> bool:
        """Latch a sample, returning False if it was not accepted.

        Samples are dropped while the slot is inactive or when a component
        is not finite.
        """
        try:
            sample.validate()
        except ValueError as exc:
            _LOG.debug("Dropping %s sample: %s", self._name, exc)
            return False
        with self._lock:
            if not self._active:
                return False
            self._reading = sample
            return True

    def reading(self) -> Optional[RawSample]:
        """Return the latest sample, or None before the first one."""
        with self._lock:
            return self._reading
