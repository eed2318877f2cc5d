"""Configuration loading and dot-path access."""

from __future__ import annotations

import os
from typing import Any

import yaml

from namematch.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config"]


class Config:
    """Configuration accessor with dot-path key support.

    Recognised keys:
        filter.default_effect: 'include' or 'exclude' for names no rule matches.
        filter.rules: List of rule mappings (see NameFilter.load).
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._yaml_path: str | None = None

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is malformed or its root is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config root must be a mapping, got {type(data).__name__}"
            )

        config = cls(data)
        config._yaml_path = yaml_path
        return config

    @property
    def path(self) -> str | None:
        """The YAML file this config was loaded from, if any."""
        return self._yaml_path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current
