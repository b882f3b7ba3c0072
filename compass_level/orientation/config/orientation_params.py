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

import math
from dataclasses import dataclass
from typing import Mapping


# Accepted readiness policies
READINESS_NONZERO_VECTOR: str = "nonzero_vector"
READINESS_ALL_COMPONENTS: str = "all_components"

READINESS_POLICIES: tuple[str, ...] = (
    READINESS_NONZERO_VECTOR,
    READINESS_ALL_COMPONENTS,
)

# Units: m/s^2. Meaning: standard gravity used for the free-fall check
STANDARD_GRAVITY_MPS2: float = 9.81

# Units: us. Meaning: sampling period suitable for UI refresh
UI_SAMPLING_PERIOD_US: int = 66_667


@dataclass(frozen=True, slots=True)
class OrientationParams:
    """Configuration parameters for the orientation core.

    Data contract:
        Heading smoothing:
        - smoothing_alpha: exponential low-pass gain in (0, 1]. Higher is
          more responsive, lower is smoother.

        Input gating:
        - readiness_policy: how a vector counts as "sampled".
          "nonzero_vector" accepts any vector other than the zero vector.
          "all_components" requires every component to be non-zero.
        - free_fall_gravity_ratio: minimum gravity magnitude as a fraction of
          standard gravity before a heading is computed.
        - min_horizontal_field_norm: minimum norm of (magnetic field x
          gravity) in uT * m/s^2. Below it gravity and field are treated as
          collinear.

        Sensor lifecycle:
        - sampling_period_us: sampling period requested from the sensor
          source on start().

        Presentation thresholds:
        - level_threshold_deg: |roll| and |pitch| below this are level.
        - tilted_threshold_deg: |roll| or |pitch| above this is tilted.

    Determinism and edge cases:
        - validate() rejects out-of-range values with ValueError.
        - level_threshold_deg must not exceed tilted_threshold_deg.
    """

    smoothing_alpha: float
    readiness_policy: str
    free_fall_gravity_ratio: float
    min_horizontal_field_norm: float
    sampling_period_us: int
    level_threshold_deg: float
    tilted_threshold_deg: float

    @staticmethod
    def defaults() -> OrientationParams:
        """Return the default parameter set."""
        params: OrientationParams = OrientationParams(
            smoothing_alpha=0.15,
            readiness_policy=READINESS_NONZERO_VECTOR,
            free_fall_gravity_ratio=0.1,
            min_horizontal_field_norm=0.1,
            sampling_period_us=UI_SAMPLING_PERIOD_US,
            level_threshold_deg=0.5,
            tilted_threshold_deg=2.0,
        )
        params.validate()
        return params

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> OrientationParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise ValueError("params must be a mapping")
        unknown_keys: list[str] = sorted(set(params.keys()) - set(cls._field_order()))
        if unknown_keys:
            raise ValueError(f"unknown parameter: {unknown_keys[0]}")
        defaults: OrientationParams = cls.defaults()
        result: OrientationParams = cls(
            smoothing_alpha=cls._as_float(
                "smoothing_alpha",
                params.get("smoothing_alpha", defaults.smoothing_alpha),
            ),
            readiness_policy=cls._as_str(
                "readiness_policy",
                params.get("readiness_policy", defaults.readiness_policy),
            ),
            free_fall_gravity_ratio=cls._as_float(
                "free_fall_gravity_ratio",
                params.get("free_fall_gravity_ratio", defaults.free_fall_gravity_ratio),
            ),
            min_horizontal_field_norm=cls._as_float(
                "min_horizontal_field_norm",
                params.get(
                    "min_horizontal_field_norm", defaults.min_horizontal_field_norm
                ),
            ),
            sampling_period_us=cls._as_int(
                "sampling_period_us",
                params.get("sampling_period_us", defaults.sampling_period_us),
            ),
            level_threshold_deg=cls._as_float(
                "level_threshold_deg",
                params.get("level_threshold_deg", defaults.level_threshold_deg),
            ),
            tilted_threshold_deg=cls._as_float(
                "tilted_threshold_deg",
                params.get("tilted_threshold_deg", defaults.tilted_threshold_deg),
            ),
        )
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameter ranges and raise ValueError on failure."""
        if not 0.0 < self.smoothing_alpha <= 1.0:
            raise ValueError("smoothing_alpha must be in (0, 1]")
        if self.readiness_policy not in READINESS_POLICIES:
            raise ValueError(
                f"readiness_policy must be one of {', '.join(READINESS_POLICIES)}"
            )
        if self.free_fall_gravity_ratio < 0.0 or self.free_fall_gravity_ratio >= 1.0:
            raise ValueError("free_fall_gravity_ratio must be in [0, 1)")
        if self.min_horizontal_field_norm < 0.0:
            raise ValueError("min_horizontal_field_norm must be non-negative")
        if self.sampling_period_us < 0:
            raise ValueError("sampling_period_us must be non-negative")
        if self.level_threshold_deg <= 0.0:
            raise ValueError("level_threshold_deg must be positive")
        if self.tilted_threshold_deg < self.level_threshold_deg:
            raise ValueError("tilted_threshold_deg must be >= level_threshold_deg")

    def as_dict(self) -> dict[str, object]:
        """Return a plain dict representation."""
        return {name: getattr(self, name) for name in self._field_order()}

    @staticmethod
    def _field_order() -> tuple[str, ...]:
        return (
            "smoothing_alpha",
            "readiness_policy",
            "free_fall_gravity_ratio",
            "min_horizontal_field_norm",
            "sampling_period_us",
            "level_threshold_deg",
            "tilted_threshold_deg",
        )

    @staticmethod
    def _as_float(name: str, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a number")
        result: float = float(value)
        if not math.isfinite(result):
            raise ValueError(f"{name} must be finite")
        return result

    @staticmethod
    def _as_int(name: str, value: object) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an int")
        return int(value)

    @staticmethod
    def _as_str(name: str, value: object) -> str:
        if not isinstance(value, str):
            raise ValueError(f"{name} must be a string")
        return value
