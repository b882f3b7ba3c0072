################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Latest raw sensor vectors consumed by the orientation engine."""

from __future__ import annotations

import logging
from typing import Optional

from compass_level.orientation.config.orientation_params import (
    READINESS_ALL_COMPONENTS,
)
from compass_level.orientation.config.orientation_params import (
    READINESS_NONZERO_VECTOR,
)
from compass_level.orientation.config.orientation_params import READINESS_POLICIES
from compass_level.orientation.orientation_types import ZERO_VECTOR
from compass_level.orientation.orientation_types import Vector3


_LOG: logging.Logger = logging.getLogger(__name__)


class VectorSampleStore:
    """Holds the most recent gravity, magnetic field and rotation rate samples.

    Each slot starts as the zero vector and is overwritten in place by every
    accepted sample. Slots are never cleared during a session.

    Non-finite samples are dropped and the slot keeps its previous value.
    """

    def __init__(self, readiness_policy: str = READINESS_NONZERO_VECTOR) -> None:
        if readiness_policy not in READINESS_POLICIES:
            raise ValueError(f"unknown readiness policy: {readiness_policy}")

        self._readiness_policy: str = readiness_policy
        self._gravity: Vector3 = ZERO_VECTOR
        self._magnetic_field: Vector3 = ZERO_VECTOR
        self._rotation_rate: Vector3 = ZERO_VECTOR

    @property
    def readiness_policy(self) -> str:
        return self._readiness_policy

    @property
    def gravity(self) -> Vector3:
        """Latest gravity reading in m/s^2."""
        return self._gravity

    @property
    def magnetic_field(self) -> Vector3:
        """Latest magnetic field reading in uT."""
        return self._magnetic_field

    @property
    def rotation_rate(self) -> Vector3:
        """Latest gyroscope reading in rad/s. Not used for angles."""
        return self._rotation_rate

    def set_gravity(self, vector: Vector3) -> bool:
        """Overwrite the gravity slot. Returns False if the sample was dropped."""
        if not self._accept("gravity", vector):
            return False
        self._gravity = vector
        return True

    def set_magnetic_field(self, vector: Vector3) -> bool:
        if not self._accept("magnetic field", vector):
            return False
        self._magnetic_field = vector
        return True

    def set_rotation_rate(self, vector: Vector3) -> bool:
        if not self._accept("rotation rate", vector):
            return False
        self._rotation_rate = vector
        return True

    def is_gravity_sampled(self, readiness_policy: Optional[str] = None) -> bool:
        return self._is_sampled(self._gravity, readiness_policy)

    def is_magnetic_field_sampled(self, readiness_policy: Optional[str] = None) -> bool:
        return self._is_sampled(self._magnetic_field, readiness_policy)

    def is_ready(self, readiness_policy: Optional[str] = None) -> bool:
        """Return True once both gravity and magnetic field have been sampled.

        Args:
            readiness_policy: Policy overriding the store's own, or None
        """
        if not self.is_gravity_sampled(readiness_policy):
            return False
        return self.is_magnetic_field_sampled(readiness_policy)

    def _is_sampled(self, vector: Vector3, readiness_policy: Optional[str]) -> bool:
        policy: str = (
            readiness_policy
            if readiness_policy is not None
            else self._readiness_policy
        )
        if policy not in READINESS_POLICIES:
            raise ValueError(f"unknown readiness policy: {policy}")
        if policy == READINESS_ALL_COMPONENTS:
            return vector.has_all_components()
        return not vector.is_zero()

    @staticmethod
    def _accept(kind: str, vector: Vector3) -> bool:
        if not vector.is_finite():
            _LOG.debug("Dropping non-finite %s sample %s", kind, vector)
            return False
        return True
