#!/usr/bin/env python3
"""
Generate an extended-format tags file for Zig sources.

Tags are written to standard output (or --output) in argument order, one
line per function, container, error set, variable and container member.

Usage:
    python run_ztags.py src/main.zig src/util.zig > tags
    python run_ztags.py --output tags $(find . -name '*.zig')
"""

import argparse
import logging
import os
import sys
import tempfile
from typing import List, Optional

from core.startup_config import ConfigValidationError, load_tags_config
from core.structured_logging import configure_structured_logging
from tagging.config import SORT_HELPER_SCRIPT
from tagging.emitter import TagEmitter, WriteError
from tagging.extractor import tag_files

logger = logging.getLogger(__name__)

USAGE = """\
Usage: {program} FILE(s)

To sort and speed up large tag files you may want to use the following \
pipe-able bash script to generate a tags file
"""


def build_arg_parser(program: str) -> argparse.ArgumentParser:
    """Build the command-line parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog=program,
        description="Generate extended-format tags for Zig source files.",
        add_help=True,
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Zig source files to index.",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write tags to this file instead of standard output ('-').",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file. Default: $ZTAGS_CONFIG",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log more detail to stderr (-v info, -vv debug).",
    )
    return parser


def print_usage(program: str) -> None:
    """Print usage to stderr and the sort helper script to stdout."""
    sys.stderr.write(USAGE.format(program=program))
    sys.stderr.flush()
    sys.stdout.write(SORT_HELPER_SCRIPT.format(program=program))
    sys.stdout.flush()


def _verbosity_level(verbose: int) -> Optional[str]:
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return None


def _write_to_file(files: List[str], output: str) -> int:
    """Tag into a temporary file beside ``output`` and move it into place.

    An existing tags file is only replaced when at least one input was
    processed, so a failed run leaves the previous index untouched.
    """
    directory = os.path.dirname(os.path.abspath(output))
    fd, tmp_path = tempfile.mkstemp(
        prefix=".%s." % os.path.basename(output), suffix=".tmp", dir=directory
    )
    try:
        with os.fdopen(fd, "wb") as sink:
            emitter = TagEmitter(sink)
            stats = tag_files(files, emitter)
            emitter.flush()
        if stats.files_processed > 0:
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(tmp_path, 0o666 & ~umask)
            os.replace(tmp_path, output)
            logger.debug("Wrote %d tags to %s", stats.tags_emitted, output)
    finally:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
    return stats.files_processed


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


def run(files: List[str], output: str) -> int:
    """Tag ``files`` into ``output`` and return the number processed."""
    if output != "-":
        return _write_to_file(files, output)

    emitter = TagEmitter(sys.stdout.buffer)
    stats = tag_files(files, emitter)
    emitter.flush()
    return stats.files_processed


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    program = os.path.basename(sys.argv[0]) or "ztags"
    args = build_arg_parser(program).parse_args(argv)

    configure_structured_logging()
    try:
        config = load_tags_config(
            config_path=args.config,
            log_level=_verbosity_level(args.verbose),
            output=args.output,
        )
    except ConfigValidationError as e:
        logger.error("Configuration error: %s", e)
        return 1
    configure_structured_logging(config.log_level_value)

    try:
        processed = run(args.files, config.output)
    except WriteError as e:
        logger.error("Output error: %s", e)
        if isinstance(e.__cause__, BrokenPipeError):
            _silence_stdout()
        return 1
    except OSError as e:
        logger.error("File error: %s", e)
        return 1

    if processed == 0:
        print_usage(program)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
