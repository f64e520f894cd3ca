"""
Integration tests for extractor.py

Tests the per-file and multi-file orchestration functions.
"""

import io
import os
import tempfile
import logging
import unittest
from unittest.mock import patch

from tagging.emitter import TagEmitter
from tagging.extractor import TaggingStats, tag_file, tag_files


class TestTaggingStats(unittest.TestCase):
    """Test TaggingStats class."""

    def test_creation(self):
        stats = TaggingStats()
        self.assertEqual(stats.files_processed, 0)
        self.assertEqual(stats.files_skipped, 0)
        self.assertEqual(stats.tags_emitted, 0)
        self.assertEqual(stats.parse_errors, 0)

    def test_to_dict(self):
        stats = TaggingStats()
        stats.files_processed = 2
        stats.tags_emitted = 7
        result = stats.to_dict()
        self.assertEqual(result["files_processed"], 2)
        self.assertEqual(result["tags_emitted"], 7)

    def test_str_representation(self):
        stats = TaggingStats()
        stats.files_skipped = 1
        self.assertIn("skipped=1", str(stats))


class TestTagFiles(unittest.TestCase):
    """Test tagging several files in argument order."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name: str, content: bytes) -> str:
        path = os.path.join(self.tmp, name)
        with open(path, "wb") as f:
            f.write(content)
        return path

    def test_tag_file_uses_given_path(self):
        path = self._write("a.zig", b"fn alpha() void {}\n")
        sink = io.BytesIO()
        errors = tag_file(path, TagEmitter(sink))
        self.assertEqual(errors, 0)
        self.assertEqual(
            sink.getvalue(),
            b"alpha\t" + os.fsencode(path) + b'\t/^fn alpha() void {}$/;"\tf\n',
        )

    def test_files_are_processed_in_order(self):
        first = self._write("b.zig", b"fn beta() void {}\n")
        second = self._write("a.zig", b"fn alpha() void {}\n")
        sink = io.BytesIO()
        stats = tag_files([first, second], TagEmitter(sink))

        names = [line.split(b"\t")[0] for line in sink.getvalue().splitlines()]
        self.assertEqual(names, [b"beta", b"alpha"])
        self.assertEqual(stats.files_processed, 2)
        self.assertEqual(stats.tags_emitted, 2)

    def test_missing_file_is_skipped_with_warning(self):
        existing = self._write("a.zig", b"const x = 1;\n")
        missing = os.path.join(self.tmp, "missing.zig")
        sink = io.BytesIO()

        with self.assertLogs("tagging.extractor", level="WARNING") as logs:
            stats = tag_files([missing, existing], TagEmitter(sink))

        self.assertTrue(any("missing.zig" in line and "not found" in line for line in logs.output))
        self.assertEqual(stats.files_processed, 1)
        self.assertEqual(stats.files_skipped, 1)
        self.assertEqual(sink.getvalue().split(b"\t")[0], b"x")

    def test_directory_is_skipped_with_warning(self):
        sink = io.BytesIO()
        with self.assertLogs("tagging.extractor", level="WARNING") as logs:
            stats = tag_files([self.tmp], TagEmitter(sink))

        self.assertTrue(any("is a directory" in line for line in logs.output))
        self.assertEqual(stats.files_processed, 0)
        self.assertEqual(sink.getvalue(), b"")

    def test_syntax_errors_are_counted(self):
        path = self._write("broken.zig", b"fn ok() void {}\nconst S = struct { x: i32 \n")
        sink = io.BytesIO()
        stats = tag_files([path], TagEmitter(sink))
        self.assertEqual(stats.files_processed, 1)
        self.assertGreater(stats.parse_errors, 0)

    def test_syntax_errors_warned_once_with_path(self):
        path = self._write("broken.zig", b"fn ok() void {}\nconst S = struct { x: i32 \n")
        with self.assertLogs(level=logging.DEBUG) as logs:
            tag_files([path], TagEmitter(io.BytesIO()))

        warnings = [
            record for record in logs.records
            if record.levelno >= logging.WARNING and "syntax errors" in record.getMessage()
        ]
        self.assertEqual(len(warnings), 1)
        self.assertIn(path, warnings[0].getMessage())

    def test_unreadable_file_aborts_run(self):
        first = self._write("a.zig", b"fn alpha() void {}\n")
        second = self._write("b.zig", b"fn beta() void {}\n")
        sink = io.BytesIO()
        with patch("tagging.extractor.parse_file", side_effect=PermissionError("denied")):
            with self.assertRaises(PermissionError):
                tag_files([first, second], TagEmitter(sink))
        self.assertEqual(sink.getvalue(), b"")


if __name__ == "__main__":
    unittest.main()
