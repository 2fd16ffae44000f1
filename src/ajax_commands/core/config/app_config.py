from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ConfigDict, Field, field_validator

from ajax_commands.core.common.exceptions import ConfigurationError
from ajax_commands.core.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_ROUTE_PREFIX,
)
from ajax_commands.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)


def _env_to_bool(name: str, default: bool, env: Mapping[str, str]) -> bool:
    """Return an environment variable parsed as a boolean flag."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_to_int(name: str, default: int, env: Mapping[str, str]) -> int:
    """Return an environment variable parsed as an integer."""
    value = env.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-integer value for %s: %r", name, value)
        return default


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v


class JsonConfig(DomainModel):
    """Options passed to the JSON encoder when rendering commands."""

    ensure_ascii: bool = True


class AppConfig(DomainModel):
    """Top-level application configuration."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    route_prefix: str = DEFAULT_ROUTE_PREFIX
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    json_options: JsonConfig = Field(default_factory=JsonConfig, alias="json")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("route_prefix")
    @classmethod
    def normalize_route_prefix(cls, v: str) -> str:
        """Ensure a single leading slash and no trailing slash."""
        stripped = v.strip().strip("/")
        return f"/{stripped}" if stripped else ""

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create configuration from ``AJAX_*`` environment variables.

        A ``.env`` file in the working directory is loaded first when
        reading the real process environment.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ
        return cls(**_env_overrides(cls().to_dict(), environ))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


def _env_overrides(data: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Apply ``AJAX_*`` environment overrides on top of ``data``."""
    result = dict(data)
    result["logging"] = dict(result.get("logging") or {})
    result["json"] = dict(result.get("json") or {})

    if "AJAX_HOST" in env:
        result["host"] = env["AJAX_HOST"]
    result["port"] = _env_to_int("AJAX_PORT", result.get("port", DEFAULT_PORT), env)
    if "AJAX_ROUTE_PREFIX" in env:
        result["route_prefix"] = env["AJAX_ROUTE_PREFIX"]
    if "AJAX_LOG_LEVEL" in env:
        result["logging"]["level"] = env["AJAX_LOG_LEVEL"]
    if "AJAX_LOG_FILE" in env:
        result["logging"]["log_file"] = env["AJAX_LOG_FILE"] or None
    result["json"]["ensure_ascii"] = _env_to_bool(
        "AJAX_JSON_ENSURE_ASCII", result["json"].get("ensure_ascii", True), env
    )
    return result


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from file and environment.

    Environment variables override values read from the YAML file.

    Args:
        config_path: Optional path to a YAML configuration file
        environ: Environment mapping, defaults to ``os.environ``

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If the file is not YAML or cannot be parsed
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config_data: dict[str, Any] = AppConfig().to_dict()

    if config_path:
        import yaml

        path = Path(config_path)
        if not path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
        else:
            if path.suffix.lower() not in [".yaml", ".yml"]:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
                    details={"path": str(path)},
                )
            try:
                with open(path, encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Could not parse configuration file: {e}",
                    details={"path": str(path)},
                ) from e
            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    "Configuration file must contain a mapping",
                    details={"path": str(path)},
                )
            for key, value in file_config.items():
                if isinstance(value, dict) and isinstance(config_data.get(key), dict):
                    config_data[key] = {**config_data[key], **value}
                else:
                    config_data[key] = value

    return AppConfig(**_env_overrides(config_data, environ))
