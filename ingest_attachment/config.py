"""Runtime settings and definition file loading."""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _load_mapping(path: Union[str, Path]) -> dict[str, Any]:
    """Load a JSON or YAML file that must contain a mapping at the top level."""
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path) as f:
            data = json.load(f)
    elif suffix in [".yaml", ".yml"]:
        with open(path) as f:
            data = yaml.safe_load(f)
    else:
        raise ValueError(f"Unsupported config file format: {path.suffix}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of {path}, got {type(data).__name__}")
    return data


class Settings(BaseModel):
    """Settings for running processors from the command line."""

    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Optional file receiving all log records")
    error_log_dir: Optional[str] = Field(default=None, description="Optional directory for rotated error logs")
    strict: bool = Field(default=True, description="Reject processor definitions with unknown keys")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        if isinstance(v, str):
            try:
                return LogLevel(v.upper())
            except ValueError:
                raise ValueError(f"Invalid log level: {v}")
        return v

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "Settings":
        """Create settings from dictionary."""
        return cls(**config_dict)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "Settings":
        """Load settings from file (JSON/YAML)."""
        return cls.from_dict(_load_mapping(config_path))


def load_definition(path: Union[str, Path]) -> dict[str, Any]:
    """Load a single processor definition (JSON/YAML mapping)."""
    return _load_mapping(path)
