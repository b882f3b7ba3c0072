################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from compass_level.orientation.orientation_engine import OrientationEngine
from compass_level.orientation.orientation_types import EngineState
from compass_level.orientation.orientation_types import OrientationOutput
from compass_level.orientation.orientation_types import Vector3
from compass_level.orientation.sensor_hub import OrientationSensorHub
from compass_level.orientation.vector_sample_store import VectorSampleStore


__all__ = [
    "EngineState",
    "OrientationEngine",
    "OrientationOutput",
    "OrientationSensorHub",
    "Vector3",
    "VectorSampleStore",
]
