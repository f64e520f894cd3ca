"""
High-level orchestrator for Zig tag generation.

This module provides the per-file entry point and the loop over the files
named on the command line.
"""

import logging
import os
from typing import Dict, Iterable

from core.structured_logging import source_scope
from tagging.emitter import TagEmitter
from tagging.parser import parse_file
from tagging.traversal import extract_tags_from_tree

logger = logging.getLogger(__name__)


class TaggingStats:
    """Statistics for a tagging run."""

    def __init__(self):
        self.files_processed = 0
        self.files_skipped = 0
        self.tags_emitted = 0
        self.parse_errors = 0

    def to_dict(self) -> Dict[str, int]:
        """Convert stats to dictionary."""
        return {
            "files_processed": self.files_processed,
            "files_skipped": self.files_skipped,
            "tags_emitted": self.tags_emitted,
            "parse_errors": self.parse_errors,
        }

    def __str__(self) -> str:
        """String representation of stats."""
        return (
            f"TaggingStats(processed={self.files_processed}, "
            f"skipped={self.files_skipped}, tags={self.tags_emitted}, "
            f"parse_errors={self.parse_errors})"
        )


def tag_file(file_path: str, emitter: TagEmitter) -> int:
    """Parse one file and emit its tags.

    The path is written into the records exactly as given.

    Args:
        file_path: Path of the Zig source file.
        emitter: Destination for the records.

    Returns:
        Number of syntax error nodes reported by the parser.

    Raises:
        FileNotFoundError: If the file does not exist.
        IsADirectoryError: If the path is a directory.
        WriteError: If the output sink fails.
    """
    tree = parse_file(file_path)
    if tree.error_count:
        logger.warning(
            "File %s contains syntax errors (%d error nodes)",
            file_path,
            tree.error_count,
        )
    extract_tags_from_tree(tree, os.fsencode(file_path), emitter)
    return tree.error_count


def tag_files(paths: Iterable[str], emitter: TagEmitter) -> TaggingStats:
    """Emit tags for every readable file in ``paths``, in order.

    Missing files and directories are reported and skipped; every other
    error aborts the run.

    Args:
        paths: File paths as given on the command line.
        emitter: Destination for the records.

    Returns:
        A ``TaggingStats`` describing the run.
    """
    stats = TaggingStats()

    for path in paths:
        with source_scope(path):
            try:
                before = emitter.tags_written
                stats.parse_errors += tag_file(path, emitter)
            except IsADirectoryError:
                logger.warning("Input '%s' is a directory, skipping...", path)
                stats.files_skipped += 1
                continue
            except FileNotFoundError:
                logger.warning("Input '%s' not found, skipping...", path)
                stats.files_skipped += 1
                continue

            stats.files_processed += 1
            stats.tags_emitted += emitter.tags_written - before

    logger.info("Tagging complete: %s", stats)
    return stats
