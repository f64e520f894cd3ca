"""Core shared configuration and logging utilities."""

from core.structured_logging import (
    configure_structured_logging,
    get_source,
    source_scope,
)
from core.startup_config import (
    ConfigValidationError,
    TagsConfig,
    build_config,
    load_config_file,
    load_tags_config,
    resolve_strict_config_validation,
)

__all__ = [
    "configure_structured_logging",
    "get_source",
    "source_scope",
    "ConfigValidationError",
    "TagsConfig",
    "build_config",
    "load_config_file",
    "load_tags_config",
    "resolve_strict_config_validation",
]
