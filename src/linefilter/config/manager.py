"""Configuration management - optional YAML defaults merged with CLI flags."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import FilterConfig


class ConfigManager:
    """Loads default settings from YAML and builds the run configuration."""

    DEFAULT_CONFIG_LOCATIONS = [
        Path("linefilter.yaml"),
        Path.home() / ".config" / "linefilter" / "config.yaml",
    ]

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Explicit path to config file. If None, searches default locations.
        """
        self.config_path = config_path
        self._defaults: dict[str, Any] | None = None

    def load_defaults(self) -> dict[str, Any]:
        """
        Read the YAML defaults file, if any.

        Returns:
            Mapping of FilterConfig field names to values (empty when no file exists).

        Raises:
            FileNotFoundError: If an explicit config path does not exist.
            ValueError: If the file is not valid YAML or not a mapping.
        """
        if self._defaults is not None:
            return self._defaults

        config_file = self._find_config_file()
        if config_file is None:
            self._defaults = {}
            return self._defaults

        try:
            with open(config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_file} must contain a mapping")

        self.config_path = config_file
        self._defaults = data
        return data

    def build(self, **overrides: Any) -> FilterConfig:
        """
        Build the immutable run configuration.

        Args:
            **overrides: Values given on the command line. ``None`` means "not given"
                and leaves the YAML default (or built-in default) in place.

        Returns:
            Validated, frozen configuration.

        Raises:
            ValueError: If the merged settings are invalid.
        """
        settings = dict(self.load_defaults())
        settings.update({key: value for key, value in overrides.items() if value is not None})

        source = self.config_path or "command line"
        try:
            return FilterConfig(**settings)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration ({source}): {e}") from e

    def _find_config_file(self) -> Path | None:
        """Find the explicit config file or the first existing default location."""
        if self.config_path is not None:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Config file not found: {self.config_path}")
            return self.config_path

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if location.exists():
                return location

        return None
