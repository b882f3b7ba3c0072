################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exponential low-pass filter for compass headings."""

from __future__ import annotations

from compass_level.orientation.rotation_math import normalize_degrees


# Units: unitless. Meaning: default heading smoothing gain
DEFAULT_SMOOTHING_ALPHA: float = 0.15


class HeadingFilter:
    """Exponential low-pass filter on the circle.

    Each update moves the smoothed heading a fraction alpha of the way toward
    the new heading, always turning the short way around. A jump from 359 deg
    to 1 deg is a +2 deg step, never -358 deg.
    """

    def __init__(self, alpha: float = DEFAULT_SMOOTHING_ALPHA) -> None:
        if not 0.0 < alpha <= 1.0:
            raise ValueError("alpha must be in (0, 1]")

        self._alpha: float = float(alpha)
        self._smoothed_heading: float = 0.0

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def smoothed_heading(self) -> float:
        """Current filter output in degrees, [0, 360)."""
        return self._smoothed_heading

    def reset(self, heading_deg: float = 0.0) -> None:
        self._smoothed_heading = normalize_degrees(heading_deg)

    def update(self, heading_deg: float) -> float:
        """Blend a new heading into the filter and return the smoothed value.

        Args:
            heading_deg: Raw heading in degrees, any range

        Returns:
            The smoothed heading in [0, 360)
        """

        raw: float = normalize_degrees(heading_deg)
        diff: float = shortest_angular_difference(raw, self._smoothed_heading)

        self._smoothed_heading = normalize_degrees(
            self._smoothed_heading + self._alpha * diff
        )

        return self._smoothed_heading


def shortest_angular_difference(target_deg: float, current_deg: float) -> float:
    """Return target - current wrapped by +/-360 into [-180, 180].

    Both inputs are expected in [0, 360).
    """

    diff: float = target_deg - current_deg
    if diff > 180.0:
        diff -= 360.0
    if diff < -180.0:
        diff += 360.0
    return diff
