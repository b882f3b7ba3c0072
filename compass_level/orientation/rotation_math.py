################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Gravity/magnetometer fusion into world axes and Euler angles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from compass_level.orientation.orientation_types import OrientationAngles
from compass_level.orientation.orientation_types import Vector3


_FLOAT_ARRAY = NDArray[np.float64]


@dataclass(frozen=True)
class WorldAxes:
    """East, North and Up world axes expressed in device coordinates.

    Each axis is a unit 3-vector. Together they form the rows of the
    rotation matrix mapping device-frame vectors into the world frame.
    """

    east: _FLOAT_ARRAY
    north: _FLOAT_ARRAY
    up: _FLOAT_ARRAY

    def rotation_matrix(self) -> _FLOAT_ARRAY:
        """Return the 3x3 device-to-world rotation matrix."""
        return np.vstack((self.east, self.north, self.up)).astype(np.float64)


def world_axes(
    gravity: Vector3,
    magnetic_field: Vector3,
    min_gravity_norm: float,
    min_horizontal_field_norm: float,
) -> Optional[WorldAxes]:
    """Derive the East-North-Up axes from gravity and magnetic field.

    Up is gravity normalized, East is (magnetic field x gravity) normalized
    and North is Up x East, which keeps the frame right-handed.

    Returns None when gravity is weaker than min_gravity_norm (free fall) or
    the field is nearly collinear with gravity, i.e. |field x gravity| is
    below min_horizontal_field_norm. Close to that limit the azimuth is
    numerically unstable; this is a known singularity of the construction.
    """

    g: _FLOAT_ARRAY = gravity.as_array()
    m: _FLOAT_ARRAY = magnetic_field.as_array()

    gravity_norm: float = float(np.linalg.norm(g))
    if gravity_norm <= 0.0 or gravity_norm < min_gravity_norm:
        return None

    h: _FLOAT_ARRAY = np.cross(m, g)
    h_norm: float = float(np.linalg.norm(h))
    if h_norm <= 0.0 or h_norm < min_horizontal_field_norm:
        return None

    east: _FLOAT_ARRAY = h / h_norm
    up: _FLOAT_ARRAY = g / gravity_norm
    north: _FLOAT_ARRAY = np.cross(up, east)

    return WorldAxes(east=east, north=north, up=up)


def euler_angles(axes: WorldAxes) -> OrientationAngles:
    """Extract azimuth, pitch and roll from the world axes.

    Azimuth is the clockwise angle from world north to the device y axis
    projected on the horizontal plane. Pitch is the rotation about the world
    east axis and roll the rotation about the world north axis.
    """

    azimuth: float = math.atan2(float(axes.east[1]), float(axes.north[1]))

    # Clip guards asin() against rounding just past +/-1
    pitch: float = math.asin(float(np.clip(-axes.up[1], -1.0, 1.0)))

    roll: float = math.atan2(float(-axes.up[0]), float(axes.up[2]))

    return OrientationAngles(azimuth_rad=azimuth, pitch_rad=pitch, roll_rad=roll)


def tilt_from_gravity(gravity: Vector3) -> tuple[float, float]:
    """Compute (roll, pitch) in degrees from the gravity vector alone.

    roll = atan2(y, z) and pitch = atan2(-x, sqrt(y^2 + z^2)). Roll is
    reported in (-180, 180] and pitch in [-90, 90].
    """

    x: float = gravity.x
    y: float = gravity.y
    z: float = gravity.z

    roll: float = math.degrees(math.atan2(y, z))
    if roll <= -180.0:
        roll += 360.0

    pitch: float = math.degrees(math.atan2(-x, math.sqrt(y * y + z * z)))

    return roll, pitch


def normalize_degrees(angle_deg: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""

    wrapped: float = math.fmod(angle_deg, 360.0)
    if wrapped < 0.0:
        wrapped += 360.0

    # Adding 360 to a tiny negative value rounds up to exactly 360
    if wrapped >= 360.0:
        wrapped = 0.0

    # Folds -0.0 into 0.0
    return wrapped + 0.0
