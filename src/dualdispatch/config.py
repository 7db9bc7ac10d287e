"""Configuration for resolvers, tables and the command line."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from dualdispatch.errors import ConfigurationError

ON_MISSING_CHOICES = ("ignore", "raise")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DispatchConfig:
    """Settings for building and using dispatch tables.

    Attributes:
        on_missing: "ignore" returns NO_HANDLER for unknown pairs,
            "raise" raises NoHandlerError instead.
        thread_safe: Guard the table with a lock.
        freeze: Freeze tables once the built-in handlers are registered.
        number_format: Format spec used when printing literal values.
        log_level: Logging level name for the command line.
    """

    on_missing: str = "ignore"
    thread_safe: bool = False
    freeze: bool = True
    number_format: str = "g"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        for key in ("on_missing", "number_format", "log_level"):
            if not isinstance(getattr(self, key), str):
                msg = f"{key} must be a string, got {getattr(self, key)!r}"
                raise ConfigurationError(msg)
        if self.on_missing not in ON_MISSING_CHOICES:
            msg = (
                f"on_missing must be one of {', '.join(ON_MISSING_CHOICES)}, "
                f"got {self.on_missing!r}"
            )
            raise ConfigurationError(msg)
        if self.log_level.upper() not in LOG_LEVELS:
            msg = f"Unknown log level: {self.log_level!r}"
            raise ConfigurationError(msg)
        try:
            format(1.5, self.number_format)
        except ValueError as e:
            msg = f"Invalid number format {self.number_format!r}: {e}"
            raise ConfigurationError(msg) from e

    @property
    def strict(self) -> bool:
        return self.on_missing == "raise"

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> DispatchConfig:
        """Build a config from a mapping, rejecting unknown keys."""
        if not data:
            return cls()
        if not isinstance(data, dict):
            msg = f"Configuration must be a mapping, got {type(data).__name__}"
            raise ConfigurationError(msg)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unknown configuration keys: {', '.join(unknown)}"
            raise ConfigurationError(msg)

        for key in ("thread_safe", "freeze"):
            if key in data and not isinstance(data[key], bool):
                msg = f"{key} must be true or false"
                raise ConfigurationError(msg)

        for key in ("on_missing", "number_format", "log_level"):
            if key in data and not isinstance(data[key], str):
                msg = f"{key} must be a string, got {data[key]!r}"
                raise ConfigurationError(msg)

        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_config(config_path: Path | str) -> DispatchConfig:
    """Load configuration from a YAML file.

    The file may hold the settings at top level or under a
    ``dualdispatch`` key.

    Args:
        config_path: Path to the YAML file.

    Returns:
        DispatchConfig built from the file.
    """
    path = Path(config_path)
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except OSError as e:
        msg = f"Cannot read configuration {path}: {e}"
        raise ConfigurationError(msg) from e
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise ConfigurationError(msg) from e

    if isinstance(data, dict) and "dualdispatch" in data:
        data = data["dualdispatch"]
    return DispatchConfig.from_dict(data)
