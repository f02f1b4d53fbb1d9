"""
SDK configuration loader.

Settings come from an optional YAML file validated with Pydantic, then
environment variables override individual values:

- GOCARDLESS_SDK_CONFIG               path to the YAML file
- GOCARDLESS_STRICT_ENUMS             "1"/"true"/"yes" decodes tolerant enums strictly
- GOCARDLESS_LOG_UNKNOWN_ENUMS        "0"/"false"/"no" silences unknown-value logging
- GOCARDLESS_UNKNOWN_ENUM_LOG_LEVEL   DEBUG, INFO, WARNING or ERROR

strict_enums exists for test suites that want to fail as soon as the API
sends a value this SDK version does not know. Leave it off in production.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


class SDKConfig(BaseModel):
    strict_enums: bool = False
    log_unknown_enum_values: bool = True
    unknown_enum_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @property
    def unknown_enum_log_levelno(self) -> int:
        return logging.getLevelName(self.unknown_enum_log_level)


def _env_flag(name: str) -> Optional[bool]:
    raw = os.getenv(name, "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return None


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}

    strict = _env_flag("GOCARDLESS_STRICT_ENUMS")
    if strict is not None:
        overrides["strict_enums"] = strict

    log_unknown = _env_flag("GOCARDLESS_LOG_UNKNOWN_ENUMS")
    if log_unknown is not None:
        overrides["log_unknown_enum_values"] = log_unknown

    level = os.getenv("GOCARDLESS_UNKNOWN_ENUM_LOG_LEVEL", "").strip().upper()
    if level:
        overrides["unknown_enum_log_level"] = level

    return overrides


def load_sdk_config(config_path: Optional[Path] = None) -> SDKConfig:
    """
    Load and validate the SDK configuration.

    Args:
        config_path: YAML file to read. Defaults to $GOCARDLESS_SDK_CONFIG;
            when neither is set only defaults and environment overrides apply.

    Returns:
        Validated SDKConfig.
    """
    if config_path is None and os.getenv("GOCARDLESS_SDK_CONFIG"):
        config_path = Path(os.environ["GOCARDLESS_SDK_CONFIG"])

    data: Dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"SDK config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            logger.error("SDK config %s must be a mapping, got %s", config_path, type(data).__name__)
            raise ValueError(f"SDK config file {config_path} must contain a mapping, got {type(data).__name__}")

    data.update(_env_overrides())

    try:
        cfg = SDKConfig(**data)
    except ValidationError as e:
        logger.error("SDK config validation failed: %s", e)
        raise

    if config_path is not None:
        logger.info("Loaded SDK config from %s", config_path)
    return cfg


_config: Optional[SDKConfig] = None


def get_config() -> SDKConfig:
    """
    Return the process-wide config, loading it on first use.

    Decoding calls this, so it never raises: a missing or invalid config is
    logged and the defaults are cached instead. Call load_sdk_config()
    directly to see the error.
    """
    global _config
    if _config is None:
        try:
            _config = load_sdk_config()
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error("Invalid SDK config, using defaults: %s", e)
            _config = SDKConfig()
    return _config


def set_config(config: SDKConfig) -> None:
    global _config
    _config = config


def reset_config() -> None:
    """Forget the cached config so the next get_config() reloads it."""
    global _config
    _config = None
