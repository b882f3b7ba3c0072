################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Sensor boundary between a platform sensor source and the engine."""

from __future__ import annotations

import logging
import threading
from typing import Callable
from typing import Optional
from typing import Protocol

from compass_level.orientation.config.orientation_params import OrientationParams
from compass_level.orientation.orientation_engine import OrientationEngine
from compass_level.orientation.orientation_types import OrientationOutput
from compass_level.orientation.orientation_types import Vector3
from compass_level.orientation.vector_sample_store import VectorSampleStore


_LOG: logging.Logger = logging.getLogger(__name__)


OrientationListener = Callable[[OrientationOutput], None]


class SensorSource(Protocol):
    """Platform sensor subscription driven by the hub lifecycle."""

    def register(self, hub: OrientationSensorHub, sampling_period_us: int) -> None:
        """Start delivering samples to the hub's on_*_sample() handlers."""

    def unregister(self, hub: OrientationSensorHub) -> None:
        """Stop delivering samples to the hub."""


class OrientationSensorHub:
    """Routes raw samples into the store and republishes engine output.

    Every sample is handled to completion (store update, recompute, listener
    notification) under one lock, so callbacks arriving on different threads
    are serialized in arrival order.

    Samples received while the hub is stopped are dropped, so no output is
    produced between stop() and the next start().
    """

    def __init__(
        self,
        params: Optional[OrientationParams] = None,
        source: Optional[SensorSource] = None,
    ) -> None:
        self._params: OrientationParams = (
            params if params is not None else OrientationParams.defaults()
        )
        self._source: Optional[SensorSource] = source

        self._store: VectorSampleStore = VectorSampleStore(
            readiness_policy=self._params.readiness_policy
        )
        self._engine: OrientationEngine = OrientationEngine(self._params)

        self._lock: threading.RLock = threading.RLock()
        self._listeners: list[OrientationListener] = []
        self._running: bool = False

    @property
    def store(self) -> VectorSampleStore:
        return self._store

    @property
    def engine(self) -> OrientationEngine:
        return self._engine

    @property
    def output(self) -> OrientationOutput:
        return self._engine.output

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Begin accepting samples and subscribe to the sensor source."""
        with self._lock:
            if self._running:
                return
            self._running = True
            if self._source is not None:
                self._source.register(self, self._params.sampling_period_us)

        _LOG.debug("Sensor hub started")

    def stop(self) -> None:
        """Unsubscribe from the sensor source and drop further samples."""
        with self._lock:
            if not self._running:
                return
            self._running = False
            if self._source is not None:
                self._source.unregister(self)

        _LOG.debug("Sensor hub stopped")

    def add_listener(self, listener: OrientationListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: OrientationListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def on_gravity_sample(self, vector: Vector3) -> None:
        with self._lock:
            if not self._running:
                return
            if self._store.set_gravity(vector):
                self._recompute()

    def on_magnetic_field_sample(self, vector: Vector3) -> None:
        with self._lock:
            if not self._running:
                return
            if self._store.set_magnetic_field(vector):
                self._recompute()

    def on_rotation_rate_sample(self, vector: Vector3) -> None:
        """Record the gyroscope sample. Rotation rate does not affect angles."""
        with self._lock:
            if not self._running:
                return
            self._store.set_rotation_rate(vector)

    def _recompute(self) -> None:
        if not self._engine.recompute(self._store):
            return

        output: OrientationOutput = self._engine.output
        for listener in list(self._listeners):
            listener(output)
