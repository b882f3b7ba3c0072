################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Manual orientation override and live/simulated display selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from compass_level.orientation.orientation_types import OrientationOutput
from compass_level.orientation.rotation_math import normalize_degrees


# Units: deg. Meaning: manual roll/pitch range offered by the controls
SIMULATED_TILT_LIMIT_DEG: float = 10.0


@dataclass
class SimulationState:
    """Presentation-owned manual override for heading, roll and pitch.

    The orientation core never reads this state. Simulation starts enabled so
    the display can be exercised without sensors.
    """

    # True when the display shows the manual values instead of live output
    enabled: bool = True

    # Manual heading, degrees in [0, 360)
    heading: float = 0.0

    # Manual roll, degrees in [-10, 10]
    roll: float = 0.0

    # Manual pitch, degrees in [-10, 10]
    pitch: float = 0.0

    def __post_init__(self) -> None:
        self.set_heading(self.heading)
        self.set_roll(self.roll)
        self.set_pitch(self.pitch)

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = bool(enabled)

    def set_heading(self, heading: float) -> None:
        self.heading = normalize_degrees(float(heading))

    def set_roll(self, roll: float) -> None:
        self.roll = _clamp_tilt(float(roll))

    def set_pitch(self, pitch: float) -> None:
        self.pitch = _clamp_tilt(float(pitch))


@dataclass(frozen=True)
class LiveOrientation:
    """Display values taken from the orientation engine."""

    output: OrientationOutput

    @property
    def heading(self) -> float:
        return self.output.heading

    @property
    def roll(self) -> float:
        return self.output.roll

    @property
    def pitch(self) -> float:
        return self.output.pitch


@dataclass(frozen=True)
class SimulatedOrientation:
    """Display values taken from a snapshot of the simulation controls."""

    heading: float
    roll: float
    pitch: float


DisplayedOrientation = Union[LiveOrientation, SimulatedOrientation]


def select_displayed(
    output: OrientationOutput, simulation: SimulationState
) -> DisplayedOrientation:
    """Pick what the display shows: the manual override when enabled."""

    if simulation.enabled:
        return SimulatedOrientation(
            heading=simulation.heading,
            roll=simulation.roll,
            pitch=simulation.pitch,
        )
    return LiveOrientation(output=output)


def _clamp_tilt(value: float) -> float:
    return max(-SIMULATED_TILT_LIMIT_DEG, min(value, SIMULATED_TILT_LIMIT_DEG))
