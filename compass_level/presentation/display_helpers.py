################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Stateless helpers that map orientation values to display categories."""

from __future__ import annotations

import enum
import math


# Compass points in clockwise order starting at north
DIRECTION_LABELS: tuple[str, ...] = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

# Units: deg. Meaning: width of one compass sector
SECTOR_WIDTH_DEG: float = 360.0 / len(DIRECTION_LABELS)

# Units: deg. Meaning: |roll| and |pitch| below this read as level
LEVEL_THRESHOLD_DEG: float = 0.5

# Units: deg. Meaning: |roll| or |pitch| above this reads as tilted
TILTED_THRESHOLD_DEG: float = 2.0


class TiltZone(enum.Enum):
    """Background zone for the level display.

    Between the level and tilted thresholds neither condition holds and the
    zone is NEUTRAL.
    """

    TILTED = "tilted"
    LEVEL = "level"
    NEUTRAL = "neutral"


def direction_label(heading: float) -> str:
    """Return the 8-point compass label for a heading in degrees.

    Sectors are centered on each point, so "N" spans [337.5, 22.5).
    """

    shifted: float = (heading + SECTOR_WIDTH_DEG / 2.0) % 360.0
    index: int = int(math.floor(shifted / SECTOR_WIDTH_DEG)) % len(DIRECTION_LABELS)
    return DIRECTION_LABELS[index]


def tilt_zone_color(
    roll: float,
    pitch: float,
    level_threshold_deg: float = LEVEL_THRESHOLD_DEG,
    tilted_threshold_deg: float = TILTED_THRESHOLD_DEG,
) -> TiltZone:
    if abs(roll) > tilted_threshold_deg or abs(pitch) > tilted_threshold_deg:
        return TiltZone.TILTED
    if is_level(roll, pitch, level_threshold_deg):
        return TiltZone.LEVEL
    return TiltZone.NEUTRAL


def is_level(
    roll: float,
    pitch: float,
    threshold_deg: float = LEVEL_THRESHOLD_DEG,
) -> bool:
    return abs(roll) < threshold_deg and abs(pitch) < threshold_deg
