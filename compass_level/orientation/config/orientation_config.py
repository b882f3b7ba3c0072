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

from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Mapping

import yaml

from compass_level.orientation.config.orientation_params import OrientationParams


# Key used by ROS 2 parameter files to nest node parameters
ROS_PARAMETERS_KEY: str = "ros__parameters"


@dataclass(frozen=True, slots=True)
class OrientationConfig:
    """Validated configuration for the orientation core.

    Accepts either a flat mapping of OrientationParams fields or a ROS 2
    parameter file of the form:

        compass_level:
          ros__parameters:
            smoothing_alpha: 0.15

    Construction never reads ROS parameters or the clock.
    """

    params: OrientationParams

    @classmethod
    def defaults(cls) -> OrientationConfig:
        return cls(params=OrientationParams.defaults())

    @classmethod
    def from_params(
        cls, params: OrientationParams | Mapping[str, object]
    ) -> OrientationConfig:
        """Construct a configuration from parameters or a mapping."""
        if isinstance(params, Mapping):
            params_obj: OrientationParams = OrientationParams.from_dict(params)
        elif isinstance(params, OrientationParams):
            params_obj = params
        else:
            raise ValueError("params must be OrientationParams or mapping")
        params_obj.validate()
        return cls(params=params_obj)

    @classmethod
    def from_yaml_text(cls, text: str) -> OrientationConfig:
        """Parse a YAML document into a configuration."""
        try:
            document: Any = yaml.safe_load(text)
        except yaml.YAMLError as err:
            raise ValueError(f"invalid YAML: {err}") from err

        if document is None:
            return cls.defaults()
        if not isinstance(document, Mapping):
            raise ValueError("YAML root must be a mapping")

        return cls.from_params(_unwrap_ros_parameters(document))

    @classmethod
    def from_yaml_file(cls, path: str | Path) -> OrientationConfig:
        """Load a configuration from a YAML file."""
        yaml_path: Path = Path(path)
        return cls.from_yaml_text(yaml_path.read_text(encoding="utf-8"))

    def as_dict(self) -> dict[str, object]:
        return {"params": self.params.as_dict()}


def _unwrap_ros_parameters(document: Mapping[str, Any]) -> Mapping[str, Any]:
    if len(document) != 1:
        return document

    inner: Any = next(iter(document.values()))
    if isinstance(inner, Mapping) and ROS_PARAMETERS_KEY in inner:
        parameters: Any = inner[ROS_PARAMETERS_KEY]
        if parameters is None:
            return {}
        if not isinstance(parameters, Mapping):
            raise ValueError(f"{ROS_PARAMETERS_KEY} must be a mapping")
        return parameters

    return document
