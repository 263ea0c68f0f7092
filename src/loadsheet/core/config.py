"""Configuration loader for YAML documents.

Aircraft profiles and logging settings are plain YAML. ConfigLoader gives
dotted access to nested keys with defaults, so profile parsing can read
"aircraft.fuel_capacity.gallons" without a chain of dict lookups.

Typical usage example:
    from loadsheet.core.config import ConfigLoader

    config = ConfigLoader.load("profiles/vh_ypb.yaml")
    mtow = config.get("aircraft.weights.max_takeoff_lbs")
"""

from pathlib import Path
from typing import Any

import yaml

from loadsheet.core.logging_system import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Read-only view over a parsed YAML document.

    Examples:
        >>> config = ConfigLoader.from_text("aircraft: {registration: VH-YPB}")
        >>> config.get("aircraft.registration")
        'VH-YPB'
    """

    def __init__(self, data: dict[str, Any], source: str = "<memory>") -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
            source: Where the data came from, used in error messages.
        """
        self._data = data
        self.source = source

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing or is not valid YAML.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise ConfigError(f"Failed to read configuration: {e}") from e

        config = cls.from_text(text, source=str(path))
        logger.info("Loaded configuration from: %s", path)
        return config

    @classmethod
    def from_text(cls, text: str, source: str = "<memory>") -> "ConfigLoader":
        """Parse configuration from a YAML string.

        Raises:
            ConfigError: If the text is not valid YAML or not a mapping.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse configuration {source}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {source}")

        return cls(data, source)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def require(self, key: str) -> Any:
        """Get a configuration value that must be present.

        Raises:
            ConfigError: If the key is missing.
        """
        value = self.get(key)
        if value is None:
            raise ConfigError(f"Missing required key '{key}' in {self.source}")
        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> "ConfigLoader":
        """Return a new loader with other's values layered on top.

        Args:
            other: ConfigLoader whose values override this one's.
        """
        return ConfigLoader(self._merge_dicts(self._data, other._data), self.source)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result

    def to_dict(self) -> dict[str, Any]:
        """Get the configuration as a dictionary."""
        return self._data.copy()
