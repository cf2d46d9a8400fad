################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Sensor fusion core driving a view from accelerometer and magnetometer data."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from oasis_skyview.sensors.config.sensors_config import SensorsConfig
from oasis_skyview.sensors.models.axis_remapper import AxisRemapper
from oasis_skyview.sensors.models.axis_remapper import remapper_for_platform
from oasis_skyview.sensors.models.declination_model import DeclinationModel
from oasis_skyview.sensors.models.declination_model import DeclinationProvider
from oasis_skyview.sensors.models.low_pass_filter import LowPassFilter
from oasis_skyview.sensors.models.orientation_tracker import OrientationTracker
from oasis_skyview.sensors.models.tilt_estimator import TiltEstimator
from oasis_skyview.sensors.models.view_composer import ViewComposer
from oasis_skyview.sensors.sensor_readings import SensorReading
from oasis_skyview.sensors.sensor_types.attitude import Attitude
from oasis_skyview.sensors.sensor_types.raw_sample import RawSample
from oasis_skyview.sensors.sensor_types.screen_orientation import RawOrientation
from oasis_skyview.sensors.sensor_types.screen_orientation import ScreenOrientation
from oasis_skyview.sensors.sensor_types.view_frame import TickReport
from oasis_skyview.sensors.sensor_types.view_frame import ViewFrame
from oasis_skyview.sensors.sensors_interfaces import LocationClock
from oasis_skyview.sensors.sensors_interfaces import ViewControl


_LOG: logging.Logger = logging.getLogger(__name__)


class SensorsCore:
    """ROS-agnostic sensor fusion core for sensor-driven view control.

    Block diagram (one update tick):

        accel reading --> [normalize g] --> [low-pass] --> [remap axes]
                                                               |
                                                               v
                                                        [roll, pitch]
                                                               |
        mag reading ----------------------> [low-pass] --> [remap axes]
                                                               |
                                                               v
                          declination --> [tilt-compensated azimuth]
                                                               |
                                                               v
                                                        [view composer]
                                                               |
                                                               v
                                          direction, up, reference angle

    Lifecycle:
        set_enabled(True) activates the reading slots, re-arms the filter
        first-measure bypass and looks up the declination once.
        set_enabled(False) deactivates the slots and restores the canonical
        up vector and a zero reference angle. Repeating the current value is
        a no-op.

    Threading:
        update() and set_enabled() run on the frame loop thread. Samples and
        orientation events may arrive from platform callback threads; they are
        latched behind locks and only consumed inside update().
    """

    def __init__(
        self,
        config: SensorsConfig,
        view: ViewControl,
        declination_provider: Optional[DeclinationProvider] = None,
        location_clock: Optional[LocationClock] = None,
        remapper: Optional[AxisRemapper] = None,
    ) -> None:
        self._config: SensorsConfig = config
        self._view: ViewControl = view

        self._remapper: AxisRemapper = (
            remapper
            if remapper is not None
            else remapper_for_platform(config.platform())
        )
        self._declination_model: DeclinationModel = DeclinationModel(
            declination_provider,
            location_clock,
            fallback_deg=config.params.declination_deg_fallback,
        )
        self._filter: LowPassFilter = LowPassFilter(config.params)
        self._estimator: TiltEstimator = TiltEstimator()
        self._composer: ViewComposer = ViewComposer(view)

        self._accel: SensorReading = SensorReading("accelerometer")
        self._mag: SensorReading = SensorReading("magnetometer")

        self._orientation_lock: threading.Lock = threading.Lock()
        self._tracker: OrientationTracker = OrientationTracker()

        self._enabled: bool = False
        self._declination_rad: float = 0.0

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def declination_rad(self) -> float:
        return self._declination_rad

    @property
    def orientation(self) -> ScreenOrientation:
        with self._orientation_lock:
            return self._tracker.orientation

    @property
    def low_pass_filter(self) -> LowPassFilter:
        return self._filter

    def set_enabled(self, value: bool) -> None:
        """Enable or disable sensor-driven view control."""
        if value == self._enabled:
            return

        if value:
            self._declination_rad = self._declination_model.lookup_rad()

        self._accel.set_active(value)
        self._mag.set_active(value)
        self._filter.reset()

        if not value:
            self._composer.reset()

        self._enabled = value
        _LOG.info("Sensor view control %s", "enabled" if value else "disabled")

    def on_accel_sample(self, sample: RawSample) -> bool:
        """Latch an accelerometer sample in m/s^2."""
        return self._accel.publish(sample)

    def on_mag_sample(self, sample: RawSample) -> bool:
        """Latch a magnetometer sample."""
        return self._mag.publish(sample)

    def on_orientation_event(self, raw: RawOrientation) -> ScreenOrientation:
        """Apply a hardware orientation reading while enabled."""
        with self._orientation_lock:
            if self._enabled:
                self._tracker.on_orientation_event(raw)
            return self._tracker.orientation

    def set_screen_orientation(self, orientation: ScreenOrientation) -> None:
        """Set the screen rotation for platforms reporting it directly."""
        with self._orientation_lock:
            self._tracker.set_orientation(orientation)

    def update(self, delta_time_s: float = 0.0) -> Optional[TickReport]:
        """Run one update tick from the frame loop.

        Returns the outputs written to the view, or None when the core is
        disabled or no accelerometer reading is available yet.
        """
        if not self._enabled:
            return None

        accel_sample: Optional[RawSample] = self._accel.reading()
        if accel_sample is None:
            _LOG.debug("No accelerometer reading, skipping tick")
            return None

        orientation: ScreenOrientation = self.orientation
        coefficient: float = self._filter.next_coefficient(self._view.get_fov_deg())

        accel: tuple[float, float, float] = self._remapper.apply(
            *self._filter.blend_accel(accel_sample, coefficient), orientation
        )

        mag: Optional[tuple[float, float, float]] = None
        mag_sample: Optional[RawSample] = self._mag.reading()
        if mag_sample is None:
            _LOG.debug("No magnetometer reading, keeping view azimuth")
        else:
            mag = self._remapper.apply(
                *self._filter.blend_mag(mag_sample, coefficient), orientation
            )

        attitude: Attitude = self._estimator.estimate(
            accel, mag, self._declination_rad
        )
        frame: ViewFrame = self._composer.apply(attitude)

        return TickReport(
            attitude=attitude,
            coefficient=coefficient,
            reference_angle_deg=attitude.roll_deg,
            frame=frame,
        )
