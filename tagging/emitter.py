"""
Serialization of tag records to an output stream.
"""

import logging
from typing import BinaryIO

from tagging.models import TagRecord

logger = logging.getLogger(__name__)


class TagsError(Exception):
    """Base class for errors raised while generating tags."""


class WriteError(TagsError):
    """Raised when the output sink rejects a write."""


def format_tag_line(record: TagRecord) -> bytes:
    """Render one record in the extended tags format.

    The line has the form::

        name<TAB>path<TAB>/^pattern$/;"<TAB>kind[<TAB>label:scope]

    Args:
        record: The record to render.

    Returns:
        The encoded line, including the trailing newline.
    """
    line = b"%s\t%s\t/^%s$/;\"\t%s" % (
        record.name,
        record.path,
        record.pattern,
        record.kind.encode("ascii"),
    )
    if record.has_scope:
        line += b"\t%s:%s" % (record.scope_label, record.scope)
    return line + b"\n"


class TagEmitter:
    """Writes tag lines to a binary sink in the order they are emitted."""

    def __init__(self, sink: BinaryIO):
        self.sink = sink
        self.tags_written = 0

    def emit(self, record: TagRecord) -> None:
        """Write ``record`` to the sink.

        Raises:
            WriteError: If the sink fails; the run cannot continue.
        """
        try:
            self.sink.write(format_tag_line(record))
        except OSError as e:
            raise WriteError(f"Failed to write tag '{record.name!r}': {e}") from e
        self.tags_written += 1
        logger.debug(
            "Emitted %s tag %s", record.kind, record.name.decode("utf-8", "replace")
        )

    def flush(self) -> None:
        try:
            self.sink.flush()
        except OSError as e:
            raise WriteError(f"Failed to flush tags output: {e}") from e
