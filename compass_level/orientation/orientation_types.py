################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Value types shared by the orientation core."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class Vector3:
    """Three-axis sensor reading in the device frame.

    Gravity readings are in m/s^2, magnetic field readings in microtesla and
    rotation rates in rad/s. The zero vector means "not yet sampled".
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector3:
        """Build a vector from exactly three numbers."""
        data: tuple[float, ...] = tuple(float(value) for value in values)
        if len(data) != 3:
            raise ValueError(f"Vector3 needs 3 components, got {len(data)}")
        return cls(x=data[0], y=data[1], z=data[2])

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def has_all_components(self) -> bool:
        """Return True when no component is exactly zero."""
        return self.x != 0.0 and self.y != 0.0 and self.z != 0.0


ZERO_VECTOR: Vector3 = Vector3()


@dataclass(frozen=True, slots=True)
class OrientationOutput:
    """Published orientation values, all in degrees.

    Attributes:
        heading: Smoothed compass heading in [0, 360), clockwise from north
        roll: Left/right tilt in (-180, 180]
        pitch: Forward/backward tilt in [-90, 90]
    """

    heading: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0


@dataclass(frozen=True, slots=True)
class OrientationAngles:
    """Euler angles extracted from the rotation matrix, in radians."""

    azimuth_rad: float
    pitch_rad: float
    roll_rad: float


class EngineState(enum.Enum):
    """Lifecycle of the heading computation.

    UNINITIALIZED: no heading has been computed yet. Roll and pitch may
    already be live from gravity alone.

    ACTIVE: both sensors have reported and headings are being published.
    """

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
