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
from typing import Optional

from oasis_skyview.sensors.math_utils.spherical import Spherical
from oasis_skyview.sensors.sensor_types.attitude import Attitude


Vector3 = tuple[float, float, float]


class TiltEstimator:
    """Roll, pitch and tilt-compensated azimuth from gravity and field.

    Inputs are smoothed and already remapped onto screen axes. With the
    screen facing the user, +y points up along the screen and +z out of it.

    Equations:
        roll  = atan2(-x, y)
        pitch = atan2(-z, sqrt(x^2 + y^2))

        Magnetic projection onto the horizontal plane, two planar steps in
        this order:
            (mx, my) <- rot2d(mx, my, -roll)
            (my, mz) <- rot2d(my, mz, pitch)

        azimuth = atan2(-mx, mz) - declination

    Numerical stability notes:
        - No singularity handling beyond atan2. With the device flat the
          roll is ill-conditioned and follows sensor noise.
        - The two-step projection is not interchangeable with a single 3D
          rotation matrix built from roll and pitch; keep the order.
    """

    @staticmethod
    def tilt(accel: Vector3) -> tuple[float, float]:
        """Return (roll, pitch) in radians from a gravity vector."""
        x, y, z = accel
        roll: float = math.atan2(-x, y)
        pitch: float = math.atan2(-z, math.sqrt(x * x + y * y))
        return roll, pitch

    @staticmethod
    def project_magnetic(mag: Vector3, roll: float, pitch: float) -> Vector3:
        """Compensate the field for roll, then pitch."""
        x, y, z = mag
        x, y = Spherical.rot2d(x, y, -roll)
        y, z = Spherical.rot2d(y, z, pitch)
        return x, y, z

    @staticmethod
    def azimuth(
        mag: Vector3, roll: float, pitch: float, declination_rad: float
    ) -> float:
        """Return the declination-corrected heading in radians."""
        x, _, z = TiltEstimator.project_magnetic(mag, roll, pitch)
        return math.atan2(-x, z) - declination_rad

    def estimate(
        self,
        accel: Vector3,
        mag: Optional[Vector3],
        declination_rad: float,
    ) -> Attitude:
        """Estimate the attitude; azimuth is None when mag is None."""
        roll, pitch = self.tilt(accel)
        if mag is None:
            return Attitude(roll=roll, pitch=pitch)
        return Attitude(
            roll=roll,
            pitch=pitch,
            azimuth=self.azimuth(mag, roll, pitch, declination_rad),
        )
