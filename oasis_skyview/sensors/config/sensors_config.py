################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper and YAML loading for the sensor core."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Mapping

import yaml

from oasis_skyview.sensors.config.sensors_params import SensorsParams
from oasis_skyview.sensors.models.axis_remapper import known_platforms


class SensorsConfigError(Exception):
    """Raised when sensor configuration validation or loading fails."""


@dataclass(frozen=True)
class SensorsConfig:
    """Convenience wrapper around sensor fusion parameters."""

    params: SensorsParams

    def __init__(self, params: SensorsParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> SensorsConfig:
        """Build a configuration from a parameter mapping."""
        try:
            params: SensorsParams = SensorsParams.from_dict(data)
        except ValueError as exc:
            raise SensorsConfigError(str(exc)) from exc
        return cls(params)

    @classmethod
    def defaults(cls) -> SensorsConfig:
        return cls(SensorsParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants and the platform capability tag."""
        try:
            self.params.validate()
        except ValueError as exc:
            raise SensorsConfigError(str(exc)) from exc

        if self.params.platform not in known_platforms():
            raise SensorsConfigError(
                f"platform must be one of {', '.join(known_platforms())}"
            )

    def platform(self) -> str:
        """Return the configured axis remap capability tag."""
        return self.params.platform


def is_yaml_path(path: str | os.PathLike[str]) -> bool:
    """Return True if the path has a YAML extension."""
    suffix: str = Path(os.fspath(path)).suffix.lower()
    return suffix in {".yaml", ".yml"}


def loads_sensors_config(text: str) -> SensorsConfig:
    """Parse a sensor configuration from YAML text."""
    try:
        loaded: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SensorsConfigError("Invalid YAML") from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise SensorsConfigError("YAML root must be a mapping")
    return SensorsConfig.from_mapping(loaded)


def dumps_sensors_config(config: SensorsConfig) -> str:
    """Serialize a sensor configuration to deterministic YAML."""
    return yaml.safe_dump(
        config.params.as_dict(),
        sort_keys=False,
        indent=2,
        default_flow_style=False,
    )


def load_sensors_config(path: str | os.PathLike[str]) -> SensorsConfig:
    """Load a sensor configuration from a YAML file."""
    if not is_yaml_path(path):
        raise SensorsConfigError("Path must end with .yaml or .yml")

    path_obj: Path = Path(os.fspath(path))
    try:
        text: str = path_obj.read_text(encoding="utf-8")
    except OSError as exc:
        raise SensorsConfigError(
            f"Failed to load sensor configuration from {path_obj}"
        ) from exc
    return loads_sensors_config(text)
