################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for compass labels and level zones."""

from __future__ import annotations

import pytest

from compass_level.presentation.display_helpers import DIRECTION_LABELS
from compass_level.presentation.display_helpers import TiltZone
from compass_level.presentation.display_helpers import direction_label
from compass_level.presentation.display_helpers import is_level
from compass_level.presentation.display_helpers import tilt_zone_color


@pytest.mark.parametrize(
    ("heading", "label"),
    [
        (0.0, "N"),
        (22.4, "N"),
        (22.5, "NE"),
        (46.0, "NE"),
        (67.5, "E"),
        (90.0, "E"),
        (135.0, "SE"),
        (180.0, "S"),
        (225.0, "SW"),
        (270.0, "W"),
        (315.0, "NW"),
        (337.4, "NW"),
        (337.5, "N"),
        (359.0, "N"),
    ],
)
def test_direction_label_sectors(heading: float, label: str) -> None:
    assert direction_label(heading) == label


def test_direction_label_sector_boundary_below_45() -> None:
    # The sector formula decides: NE spans [22.5, 67.5), so 44 deg is NE, not N
    assert direction_label(44.0) == "NE"


def test_direction_label_wraps_out_of_range_input() -> None:
    assert direction_label(360.0) == "N"
    assert direction_label(720.0 + 90.0) == "E"
    assert direction_label(-10.0) == "N"
    assert direction_label(-90.0) == "W"


def test_every_heading_gets_a_label() -> None:
    for tenth in range(3600):
        assert direction_label(tenth / 10.0) in DIRECTION_LABELS


@pytest.mark.parametrize(
    ("roll", "pitch", "zone"),
    [
        (0.3, 0.1, TiltZone.LEVEL),
        (1.0, 1.0, TiltZone.NEUTRAL),
        (3.0, 0.0, TiltZone.TILTED),
        (0.0, -2.1, TiltZone.TILTED),
        (2.0, 0.0, TiltZone.NEUTRAL),
        (0.5, 0.0, TiltZone.NEUTRAL),
        (-0.49, 0.49, TiltZone.LEVEL),
    ],
)
def test_tilt_zone_color(roll: float, pitch: float, zone: TiltZone) -> None:
    assert tilt_zone_color(roll, pitch) is zone


def test_tilt_zone_custom_thresholds() -> None:
    assert tilt_zone_color(1.0, 0.0, level_threshold_deg=1.5) is TiltZone.LEVEL
    assert tilt_zone_color(1.0, 0.0, tilted_threshold_deg=0.8) is TiltZone.TILTED


def test_is_level() -> None:
    assert is_level(0.4, 0.4) is True
    assert is_level(0.6, 0.0) is False
    assert is_level(0.0, -0.5) is False
    assert is_level(0.6, 0.0, threshold_deg=1.0) is True
