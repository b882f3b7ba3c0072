################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the wrap-around heading filter."""

from __future__ import annotations

import pytest

from compass_level.orientation.heading_filter import HeadingFilter
from compass_level.orientation.heading_filter import shortest_angular_difference


def test_starts_at_zero() -> None:
    heading_filter = HeadingFilter()

    assert heading_filter.alpha == pytest.approx(0.15)
    assert heading_filter.smoothed_heading == 0.0


def test_single_step_moves_alpha_fraction() -> None:
    heading_filter = HeadingFilter(alpha=0.15)

    assert heading_filter.update(90.0) == pytest.approx(13.5)


def test_wraps_forward_across_north() -> None:
    heading_filter = HeadingFilter(alpha=0.15)
    heading_filter.reset(359.0)

    result = heading_filter.update(1.0)

    # +2 deg short path, not -358 deg
    assert result == pytest.approx(359.3)


def test_wrap_keeps_moving_toward_target() -> None:
    heading_filter = HeadingFilter(alpha=0.15)
    heading_filter.reset(359.0)

    previous_distance = 2.0
    for _ in range(20):
        heading = heading_filter.update(1.0)
        distance = shortest_angular_difference(1.0, heading)
        assert 0.0 < distance < previous_distance
        previous_distance = distance


def test_wraps_backward_across_north() -> None:
    heading_filter = HeadingFilter(alpha=0.15)
    heading_filter.reset(1.0)

    assert heading_filter.update(359.0) == pytest.approx(0.7)


def test_backward_step_below_zero_wraps_to_359() -> None:
    heading_filter = HeadingFilter(alpha=0.5)

    assert heading_filter.update(350.0) == pytest.approx(355.0)


def test_converges_to_constant_input() -> None:
    heading_filter = HeadingFilter(alpha=0.15)
    heading_filter.reset(359.0)

    for _ in range(200):
        heading_filter.update(1.0)

    assert heading_filter.smoothed_heading == pytest.approx(1.0, abs=1e-6)


def test_output_stays_in_range() -> None:
    heading_filter = HeadingFilter(alpha=1.0)

    for raw in (0.0, 359.999, 360.0, -45.0, 720.5):
        heading = heading_filter.update(raw)
        assert 0.0 <= heading < 360.0


def test_alpha_one_tracks_input() -> None:
    heading_filter = HeadingFilter(alpha=1.0)

    assert heading_filter.update(-45.0) == pytest.approx(315.0)


@pytest.mark.parametrize("alpha", [0.0, -0.1, 1.5])
def test_rejects_bad_alpha(alpha: float) -> None:
    with pytest.raises(ValueError):
        HeadingFilter(alpha=alpha)


def test_shortest_difference() -> None:
    assert shortest_angular_difference(1.0, 359.0) == pytest.approx(2.0)
    assert shortest_angular_difference(359.0, 1.0) == pytest.approx(-2.0)
    assert shortest_angular_difference(180.0, 0.0) == pytest.approx(180.0)
    assert shortest_angular_difference(90.0, 45.0) == pytest.approx(45.0)
