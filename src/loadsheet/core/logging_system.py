"""Logging setup for the loadsheet engine.

This module wraps the standard logging package with YAML configuration and
per-logger level overrides. The engine itself never needs explicit setup:
the first call to get_logger() installs a console-only default.

Typical usage example:
    from loadsheet.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.debug("Computed CG %.1f mm", cg_mm)

Applications that want a log file call initialize_logging() once at startup:

    initialize_logging("config/logging.yaml")
"""

import logging
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False


class LoggingError(Exception):
    """Raised when logging configuration cannot be applied."""


def initialize_logging(config_path: str | Path | None = None) -> None:
    """Initialize logging from a YAML configuration file.

    Args:
        config_path: Path to a logging YAML file. If None, the default
            configuration (console only, WARNING level) is used.

    Raises:
        LoggingError: If the file is missing or cannot be parsed.

    Examples:
        >>> initialize_logging("config/logging.yaml")
        >>> get_logger("loadsheet").info("ready")
    """
    global _logging_config, _initialized

    config = _get_default_config()
    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        if not isinstance(loaded, dict):
            raise LoggingError(f"Logging config must be a mapping: {config_path}")
        config.update(loaded)

    _reset_overrides()
    _logging_config = config
    _loggers_cache.clear()
    _configure_root_logger()

    # Engine modules create their loggers at import time, before any config
    # is read, so overrides are pushed to existing loggers here.
    for name, override in (_logging_config.get("loggers") or {}).items():
        _apply_override(logging.getLogger(name), override or {})

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Returns:
        Default logging configuration dictionary.
    """
    return {
        "level": "WARNING",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "console": {"enabled": True},
        "file": {"enabled": False, "path": "loadsheet.log"},
        "loggers": {},
    }


def _configure_root_logger() -> None:
    """Attach configured handlers to the package logger."""
    package_logger = logging.getLogger("loadsheet")
    package_logger.setLevel(_level(_logging_config.get("level", "WARNING")))

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if _logging_config.get("console", {}).get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_get_formatter())
        package_logger.addHandler(console_handler)

    file_config = _logging_config.get("file", {})
    if file_config.get("enabled", False):
        log_file = Path(file_config.get("path", "loadsheet.log"))
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(_get_formatter())
        package_logger.addHandler(file_handler)

    # Records handled here must not reach root handlers a second time.
    package_logger.propagate = not package_logger.handlers


def _level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


def _apply_override(logger: logging.Logger, override: dict[str, Any]) -> None:
    """Apply one entry of the 'loggers' section to a logger.

    Args:
        logger: Logger to configure.
        override: Mapping with optional 'level' and 'enabled' keys.
    """
    if override.get("enabled", True):
        logger.disabled = False
        if "level" in override:
            logger.setLevel(_level(override["level"]))
    else:
        logger.disabled = True


def _reset_overrides() -> None:
    """Undo the overrides of the current configuration."""
    for name in (_logging_config.get("loggers") or {}):
        logger = logging.getLogger(name)
        logger.setLevel(logging.NOTSET)
        logger.disabled = False


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        """Format time with milliseconds using dot separator."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an engine module.

    Loggers are cached. A level override can be given per logger name in the
    'loggers' section of the configuration.

    Args:
        name: Logger name (typically the module's __name__).

    Returns:
        Configured logger instance.

    Examples:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Station %s: %.1f lbs", station_id, weight)
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)

    _apply_override(logger, (_logging_config.get("loggers") or {}).get(name) or {})

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and detach handlers, returning to the uninitialized state."""
    global _initialized

    package_logger = logging.getLogger("loadsheet")
    for handler in list(package_logger.handlers):
        handler.flush()
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True

    _reset_overrides()
    _loggers_cache.clear()
    _initialized = False
