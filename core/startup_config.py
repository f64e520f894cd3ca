"""Startup configuration loading and validation.

Resolves the tool settings from an optional YAML file, environment variables
and command-line overrides, with strict and non-strict validation modes.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "ZTAGS_CONFIG"
LOG_LEVEL_ENV = "ZTAGS_LOG_LEVEL"
STRICT_ENV = "STRICT_CONFIG_VALIDATION"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_OUTPUT = "-"

_KNOWN_KEYS = {"log_level", "output", "strict"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigValidationError(RuntimeError):
    """Raised when strict startup validation fails."""


@dataclass
class TagsConfig:
    """Resolved settings for one run."""

    log_level: str = DEFAULT_LOG_LEVEL
    output: str = DEFAULT_OUTPUT
    strict: bool = False

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def resolve_strict_config_validation(default: bool = False) -> bool:
    """Resolve strict validation mode from ``STRICT_CONFIG_VALIDATION`` env."""
    return _env_flag(STRICT_ENV, default=default)


def _reject(msg: str, strict: bool) -> None:
    if strict:
        raise ConfigValidationError(msg)
    logger.warning("%s; continuing with defaults", msg)


def load_config_file(config_path: str, strict: bool = False) -> dict[str, Any]:
    """Load and parse a YAML config file.

    In non-strict mode this returns an empty dict on parse/read failures.
    In strict mode this raises ``ConfigValidationError``.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except FileNotFoundError as exc:
        msg = f"Config file not found: {config_path}"
        if strict:
            raise ConfigValidationError(msg) from exc
        logger.warning("%s; continuing with defaults", msg)
        return {}
    except yaml.YAMLError as exc:
        msg = f"Failed to parse config YAML at {config_path}: {exc}"
        if strict:
            raise ConfigValidationError(msg) from exc
        logger.warning("%s; continuing with defaults", msg)
        return {}

    if payload is None:
        return {}

    if not isinstance(payload, dict):
        _reject(f"Unexpected config payload type: {type(payload).__name__}", strict)
        return {}

    return payload


def _normalize_log_level(value: Any, strict: bool) -> Optional[str]:
    level = str(value).strip().upper()
    if level not in _LOG_LEVELS:
        _reject(f"Unknown log level '{value}'", strict)
        return None
    return level


def build_config(
    payload: dict[str, Any],
    strict: bool = False,
    log_level: Optional[str] = None,
    output: Optional[str] = None,
) -> TagsConfig:
    """Merge a config payload, environment and explicit overrides.

    Precedence, lowest first: defaults, ``payload``, ``ZTAGS_LOG_LEVEL``,
    then the ``log_level`` / ``output`` arguments.
    """
    config = TagsConfig(strict=strict)

    unknown = sorted(set(payload) - _KNOWN_KEYS)
    if unknown:
        _reject(f"Unknown config keys: {', '.join(unknown)}", strict)

    if "strict" in payload:
        config.strict = bool(payload["strict"]) or strict

    for candidate in (payload.get("log_level"), os.getenv(LOG_LEVEL_ENV), log_level):
        if candidate is None:
            continue
        level = _normalize_log_level(candidate, config.strict)
        if level is not None:
            config.log_level = level

    for candidate in (payload.get("output"), output):
        if candidate is None:
            continue
        if not isinstance(candidate, str) or not candidate:
            _reject(f"Invalid output path: {candidate!r}", config.strict)
            continue
        config.output = candidate

    return config


def load_tags_config(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    output: Optional[str] = None,
) -> TagsConfig:
    """Resolve the run configuration.

    Args:
        config_path: YAML file to read; falls back to ``ZTAGS_CONFIG``.
        log_level: Command-line log level override.
        output: Command-line output path override.

    Returns:
        The resolved ``TagsConfig``.

    Raises:
        ConfigValidationError: In strict mode, for any invalid setting.
    """
    strict = resolve_strict_config_validation()
    path = config_path or os.getenv(CONFIG_PATH_ENV)
    payload: dict[str, Any] = {}
    if path:
        payload = load_config_file(path, strict=strict)
        logger.debug("Loaded config from %s", path)
    return build_config(payload, strict=strict, log_level=log_level, output=output)
