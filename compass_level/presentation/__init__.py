################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from compass_level.presentation.display_helpers import TiltZone
from compass_level.presentation.display_helpers import direction_label
from compass_level.presentation.display_helpers import is_level
from compass_level.presentation.display_helpers import tilt_zone_color
from compass_level.presentation.simulation_state import DisplayedOrientation
from compass_level.presentation.simulation_state import LiveOrientation
from compass_level.presentation.simulation_state import SimulatedOrientation
from compass_level.presentation.simulation_state import SimulationState
from compass_level.presentation.simulation_state import select_displayed


__all__ = [
    "DisplayedOrientation",
    "LiveOrientation",
    "SimulatedOrientation",
    "SimulationState",
    "TiltZone",
    "direction_label",
    "is_level",
    "select_displayed",
    "tilt_zone_color",
]
