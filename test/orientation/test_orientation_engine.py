################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the orientation engine."""

from __future__ import annotations

import dataclasses
import math

import numpy as np
import pytest

from compass_level.orientation.config.orientation_params import (
    READINESS_ALL_COMPONENTS,
)
from compass_level.orientation.config.orientation_params import OrientationParams
from compass_level.orientation.orientation_engine import OrientationEngine
from compass_level.orientation.orientation_types import EngineState
from compass_level.orientation.orientation_types import OrientationOutput
from compass_level.orientation.orientation_types import Vector3
from compass_level.orientation.vector_sample_store import VectorSampleStore


GRAVITY_FLAT: Vector3 = Vector3(0.0, 0.0, 9.8)
FIELD_NORTH: Vector3 = Vector3(0.0, 20.0, 0.0)
FIELD_EAST: Vector3 = Vector3(-20.0, 0.0, -40.0)


def _ready_store(gravity: Vector3, field: Vector3) -> VectorSampleStore:
    store = VectorSampleStore()
    store.set_gravity(gravity)
    store.set_magnetic_field(field)
    return store


def test_nothing_sampled_is_a_no_op() -> None:
    engine = OrientationEngine()
    store = VectorSampleStore()

    assert engine.recompute(store) is False
    assert engine.output == OrientationOutput()
    assert engine.state is EngineState.UNINITIALIZED


def test_gravity_alone_updates_tilt_but_not_heading() -> None:
    engine = OrientationEngine()
    store = VectorSampleStore()
    store.set_gravity(Vector3(1.0, 2.0, 9.5))

    assert engine.recompute(store) is True

    assert engine.heading == 0.0
    assert engine.state is EngineState.UNINITIALIZED
    assert engine.angles is None
    assert engine.roll == pytest.approx(math.degrees(math.atan2(2.0, 9.5)))
    assert engine.pitch == pytest.approx(
        math.degrees(math.atan2(-1.0, math.sqrt(2.0 * 2.0 + 9.5 * 9.5)))
    )


def test_flat_facing_north_scenario() -> None:
    engine = OrientationEngine()
    store = _ready_store(GRAVITY_FLAT, FIELD_NORTH)

    assert engine.recompute(store) is True

    assert engine.state is EngineState.ACTIVE
    assert engine.heading == pytest.approx(0.0, abs=1e-9)
    assert engine.roll == pytest.approx(0.0, abs=1e-9)
    assert engine.pitch == pytest.approx(0.0, abs=1e-9)


def test_heading_is_smoothed_value() -> None:
    engine = OrientationEngine()
    store = _ready_store(GRAVITY_FLAT, FIELD_EAST)

    engine.recompute(store)

    # First step from 0 toward 90 with alpha 0.15
    assert engine.heading == pytest.approx(13.5)
    assert engine.heading == engine.smoothed_heading


def test_repeated_input_converges_to_raw_heading() -> None:
    engine = OrientationEngine()
    store = _ready_store(GRAVITY_FLAT, FIELD_EAST)

    for _ in range(200):
        engine.recompute(store)
        assert engine.heading == engine.smoothed_heading

    assert engine.heading == pytest.approx(90.0, abs=1e-6)
    assert engine.angles is not None
    assert math.degrees(engine.angles.azimuth_rad) == pytest.approx(90.0)


def test_heading_stays_in_range() -> None:
    engine = OrientationEngine()
    store = _ready_store(GRAVITY_FLAT, Vector3(20.0, 0.0, 0.0))

    for _ in range(100):
        engine.recompute(store)
        assert 0.0 <= engine.heading < 360.0

    assert engine.heading == pytest.approx(270.0, abs=1e-2)


def test_collinear_input_withholds_heading() -> None:
    engine = OrientationEngine()
    store = _ready_store(GRAVITY_FLAT, Vector3(0.0, 0.0, -40.0))

    assert engine.recompute(store) is True

    assert engine.state is EngineState.UNINITIALIZED
    assert engine.heading == 0.0
    assert engine.degenerate_count == 1
    assert engine.rotation_matrix is None


def test_active_state_is_one_way() -> None:
    engine = OrientationEngine()
    store = _ready_store(GRAVITY_FLAT, FIELD_EAST)
    engine.recompute(store)
    heading = engine.heading

    store.set_magnetic_field(Vector3(0.0, 0.0, -40.0))
    engine.recompute(store)

    assert engine.state is EngineState.ACTIVE
    assert engine.heading == heading


def test_rotation_matrix_is_a_copy() -> None:
    engine = OrientationEngine()
    engine.recompute(_ready_store(GRAVITY_FLAT, FIELD_NORTH))

    rotation = engine.rotation_matrix
    assert rotation is not None
    np.testing.assert_allclose(rotation, np.eye(3), atol=1e-12)

    rotation[0, 0] = 5.0
    again = engine.rotation_matrix
    assert again is not None
    assert again[0, 0] == pytest.approx(1.0)


def test_all_components_policy_ignores_axis_aligned_gravity() -> None:
    params = dataclasses.replace(
        OrientationParams.defaults(), readiness_policy=READINESS_ALL_COMPONENTS
    )
    engine = OrientationEngine(params)
    store = VectorSampleStore(readiness_policy=READINESS_ALL_COMPONENTS)
    store.set_gravity(GRAVITY_FLAT)
    store.set_magnetic_field(FIELD_NORTH)

    assert engine.recompute(store) is False

    store.set_gravity(Vector3(0.01, 0.01, 9.8))
    store.set_magnetic_field(Vector3(0.01, 20.0, -40.0))

    assert engine.recompute(store) is True
    assert engine.state is EngineState.ACTIVE


def test_engine_policy_applies_to_default_store() -> None:
    params = dataclasses.replace(
        OrientationParams.defaults(), readiness_policy=READINESS_ALL_COMPONENTS
    )
    engine = OrientationEngine(params)
    store = _ready_store(GRAVITY_FLAT, FIELD_NORTH)

    assert store.is_ready() is True
    assert engine.recompute(store) is False
    assert engine.state is EngineState.UNINITIALIZED


def test_custom_alpha() -> None:
    params = dataclasses.replace(OrientationParams.defaults(), smoothing_alpha=1.0)
    engine = OrientationEngine(params)

    engine.recompute(_ready_store(GRAVITY_FLAT, FIELD_EAST))

    assert engine.heading == pytest.approx(90.0)


def test_reset_returns_to_uninitialized() -> None:
    engine = OrientationEngine()
    engine.recompute(_ready_store(GRAVITY_FLAT, FIELD_EAST))

    engine.reset()

    assert engine.state is EngineState.UNINITIALIZED
    assert engine.output == OrientationOutput()
    assert engine.smoothed_heading == 0.0
    assert engine.angles is None
