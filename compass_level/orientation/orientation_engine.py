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
import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from compass_level.orientation.config.orientation_params import (
    STANDARD_GRAVITY_MPS2,
)
from compass_level.orientation.config.orientation_params import OrientationParams
from compass_level.orientation.heading_filter import HeadingFilter
from compass_level.orientation.orientation_types import EngineState
from compass_level.orientation.orientation_types import OrientationAngles
from compass_level.orientation.orientation_types import OrientationOutput
from compass_level.orientation.rotation_math import WorldAxes
from compass_level.orientation.rotation_math import euler_angles
from compass_level.orientation.rotation_math import normalize_degrees
from compass_level.orientation.rotation_math import tilt_from_gravity
from compass_level.orientation.rotation_math import world_axes
from compass_level.orientation.vector_sample_store import VectorSampleStore


_LOG: logging.Logger = logging.getLogger(__name__)


class OrientationEngine:
    """Turns the latest gravity and magnetic field samples into orientation.

    Signal flow on every recompute():

        gravity ----------------------------> [tilt_from_gravity] -> roll, pitch
           |
           +--> [readiness gate] --> [world axes] --> [euler angles]
           |                              ^                |
        magnetic field -------------------+                v
                                                   [normalize 0..360]
                                                           |
                                                           v
                                                   [heading filter] -> heading

    Roll and pitch only need gravity, so they go live as soon as gravity is
    sampled. The heading needs both sensors and is withheld until the store
    is ready.

    States:
        UNINITIALIZED until the first heading is published, then ACTIVE.
        The transition is one-way until reset().
    """

    def __init__(self, params: Optional[OrientationParams] = None) -> None:
        self._params: OrientationParams = (
            params if params is not None else OrientationParams.defaults()
        )
        self._params.validate()

        self._filter: HeadingFilter = HeadingFilter(self._params.smoothing_alpha)
        self._state: EngineState = EngineState.UNINITIALIZED
        self._output: OrientationOutput = OrientationOutput()
        self._angles: Optional[OrientationAngles] = None
        self._rotation_matrix: Optional[NDArray[np.float64]] = None
        self._degenerate_count: int = 0

    @property
    def params(self) -> OrientationParams:
        return self._params

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def output(self) -> OrientationOutput:
        """Latest published heading, roll and pitch."""
        return self._output

    @property
    def heading(self) -> float:
        return self._output.heading

    @property
    def roll(self) -> float:
        return self._output.roll

    @property
    def pitch(self) -> float:
        return self._output.pitch

    @property
    def smoothed_heading(self) -> float:
        return self._filter.smoothed_heading

    @property
    def angles(self) -> Optional[OrientationAngles]:
        """Euler angles from the last successful fusion, or None."""
        return self._angles

    @property
    def rotation_matrix(self) -> Optional[NDArray[np.float64]]:
        """Copy of the last device-to-world rotation matrix, or None."""
        if self._rotation_matrix is None:
            return None
        return np.array(self._rotation_matrix, dtype=np.float64, copy=True)

    @property
    def degenerate_count(self) -> int:
        """Number of updates skipped for free fall or collinear input."""
        return self._degenerate_count

    def reset(self) -> None:
        """Re-initialize all outputs and smoothing state."""
        self._filter.reset()
        self._state = EngineState.UNINITIALIZED
        self._output = OrientationOutput()
        self._angles = None
        self._rotation_matrix = None
        self._degenerate_count = 0

    def recompute(self, store: VectorSampleStore) -> bool:
        """Recompute the outputs from the store.

        Readiness is judged with the engine's readiness_policy, whatever
        policy the store was built with.

        Args:
            store: Latest sensor samples

        Returns:
            True if any published output was updated
        """

        roll: float = self._output.roll
        pitch: float = self._output.pitch
        heading: float = self._output.heading
        updated: bool = False

        policy: str = self._params.readiness_policy

        if store.is_gravity_sampled(policy):
            roll, pitch = tilt_from_gravity(store.gravity)
            updated = True

        if store.is_ready(policy):
            new_heading: Optional[float] = self._update_heading(store)
            if new_heading is not None:
                heading = new_heading
                updated = True

        if updated:
            self._output = OrientationOutput(heading=heading, roll=roll, pitch=pitch)

        return updated

    def _update_heading(self, store: VectorSampleStore) -> Optional[float]:
        min_gravity_norm: float = (
            self._params.free_fall_gravity_ratio * STANDARD_GRAVITY_MPS2
        )

        axes: Optional[WorldAxes] = world_axes(
            store.gravity,
            store.magnetic_field,
            min_gravity_norm=min_gravity_norm,
            min_horizontal_field_norm=self._params.min_horizontal_field_norm,
        )
        if axes is None:
            self._degenerate_count += 1
            _LOG.debug(
                "Skipping heading update, degenerate input (gravity=%s, field=%s)",
                store.gravity,
                store.magnetic_field,
            )
            return None

        angles: OrientationAngles = euler_angles(axes)
        raw_heading: float = normalize_degrees(math.degrees(angles.azimuth_rad))
        smoothed: float = self._filter.update(raw_heading)

        self._rotation_matrix = axes.rotation_matrix()
        self._angles = angles

        if self._state is EngineState.UNINITIALIZED:
            _LOG.info("Orientation engine active, first heading %.1f deg", smoothed)
            self._state = EngineState.ACTIVE

        return smoothed
