"""
GMN Tool Configuration - Centralized Settings
=============================================

All configurable parameters of the command line and batch layers in one
place. Supports environment variable overrides and JSON/YAML config files.
The checksum core reads no configuration.

Usage:
    from gs1_gmn.config import get_config
    config = get_config()
    print(config.batch.encoding)

Environment Variables:
    GMN_LOG_LEVEL=DEBUG
    GMN_LOG_FILE=gmn.log
    GMN_BATCH_ENCODING=latin-1
    GMN_SKIP_BLANK_LINES=false
    GMN_JSON_INDENT=4
"""

import os
import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any, Union

import yaml

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = ('.yaml', '.yml')


def _get_env_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Invalid int for {key}: {value}, using default {default}")
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """Get bool from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        return value.lower() in ('true', '1', 'yes', 'on')
    return default


def _get_env_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _coerce_setting(name: str, value: Any, current: Any) -> Any:
    """
    Convert a config file value to the type of the setting's current value.

    Raises:
        ValueError: If the value cannot be converted
    """
    if value is None:
        if current is None:
            return None
        raise ValueError(f"Setting {name} cannot be empty")

    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ('true', '1', 'yes', 'on', 'false', '0', 'no', 'off'):
            return value.lower() in ('true', '1', 'yes', 'on')
        raise ValueError(f"Invalid bool for {name}: {value!r}")

    if isinstance(current, int):
        if isinstance(value, bool):
            raise ValueError(f"Invalid int for {name}: {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid int for {name}: {value!r}") from None

    # str settings, including optional ones such as log_file
    if isinstance(value, (dict, list)):
        raise ValueError(f"Invalid string for {name}: {value!r}")
    return str(value)


@dataclass
class BatchConfig:
    """Line-by-line file processing configuration."""

    encoding: str = field(
        default_factory=lambda: _get_env_str('GMN_BATCH_ENCODING', 'utf-8')
    )
    skip_blank_lines: bool = field(
        default_factory=lambda: _get_env_bool('GMN_SKIP_BLANK_LINES', True)
    )
    json_indent: int = field(
        default_factory=lambda: _get_env_int('GMN_JSON_INDENT', 2)
    )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: _get_env_str('GMN_LOG_LEVEL', 'WARNING')
    )
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format: str = '%Y-%m-%d %H:%M:%S'

    # File logging (optional)
    log_file: Optional[str] = field(
        default_factory=lambda: os.environ.get('GMN_LOG_FILE')
    )


@dataclass
class GMNToolConfig:
    """Complete tool configuration."""

    batch: BatchConfig = field(default_factory=BatchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def save(self, path: Union[str, Path]):
        """Save configuration to a JSON or YAML file (chosen by suffix)."""
        path = Path(path)
        with open(path, 'w') as f:
            if path.suffix.lower() in _YAML_SUFFIXES:
                yaml.dump(self.to_dict(), f, default_flow_style=False)
            else:
                json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'GMNToolConfig':
        """
        Load configuration from a JSON or YAML file. Unknown keys are ignored.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the content is not a mapping of known sections,
                or a value has the wrong type (json.JSONDecodeError included)
            yaml.YAMLError: If a YAML file cannot be parsed
        """
        path = Path(path)
        with open(path) as f:
            if path.suffix.lower() in _YAML_SUFFIXES:
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

        config = cls()

        for section in ('batch', 'logging'):
            values = data.get(section) or {}
            if not isinstance(values, dict):
                raise ValueError(f"Config section '{section}' must be a mapping")
            target = getattr(config, section)
            for key, value in values.items():
                if hasattr(target, key):
                    current = getattr(target, key)
                    setattr(target, key, _coerce_setting(f"{section}.{key}", value, current))
                else:
                    logger.warning(f"Ignoring unknown {section} setting: {key}")

        return config


# Global configuration instance (singleton pattern)
_config: Optional[GMNToolConfig] = None


def get_config(path: Optional[Union[str, Path]] = None) -> GMNToolConfig:
    """
    Get the global configuration instance.

    Creates a new instance on first call (from ``path`` if given), returns
    cached instance thereafter.
    """
    global _config
    if _config is None:
        _config = GMNToolConfig.load(path) if path else GMNToolConfig()
    return _config


def reset_config():
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None


def setup_logging(config: LoggingConfig, verbose: bool = False):
    """Configure logging based on settings. ``verbose`` forces DEBUG."""
    level = logging.DEBUG if verbose else getattr(logging, config.level.upper(), logging.WARNING)

    handlers = [logging.StreamHandler()]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=level,
        format=config.format,
        datefmt=config.date_format,
        handlers=handlers,
        force=True,
    )
