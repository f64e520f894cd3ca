"""Structured logging helpers with per-file source context."""

from __future__ import annotations

import contextvars
import logging
import sys
from contextlib import contextmanager
from typing import Iterator

_SOURCE_VAR: contextvars.ContextVar[str] = contextvars.ContextVar(
    "source", default="-"
)

LOG_FORMAT = "%(levelname)s | source=%(source)s | %(name)s | %(message)s"


class _SourceContextFilter(logging.Filter):
    """Inject the file currently being tagged into all log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.source = _SOURCE_VAR.get("-")
        return True


def _ensure_filter_on_root_handlers() -> None:
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        has_filter = any(isinstance(f, _SourceContextFilter) for f in handler.filters)
        if not has_filter:
            handler.addFilter(_SourceContextFilter())


def configure_structured_logging(level: int = logging.WARNING) -> None:
    """Configure root logging on stderr with the source context field."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    else:
        root_logger.setLevel(level)
        formatter = logging.Formatter(LOG_FORMAT)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)
    _ensure_filter_on_root_handlers()


def get_source() -> str:
    """Get the file currently being processed."""
    return _SOURCE_VAR.get("-")


@contextmanager
def source_scope(source: str) -> Iterator[None]:
    """Temporarily set the source file context for emitted logs."""
    token = _SOURCE_VAR.set(source)
    try:
        yield
    finally:
        _SOURCE_VAR.reset(token)
