"""
Tag Generation Engine

Tree-sitter-based Zig parser and tags generator.
Emits functions, containers, error sets, variables and container members
in the extended tags format.
"""

from tagging.models import TagRecord, TraversalContext
from tagging.syntax import NodeTag, SyntaxNode, SyntaxTree, Token
from tagging.parser import create_parser, parse_file, parse_bytes, count_error_nodes
from tagging.classifier import tag_kind
from tagging.text import escape_pattern, extract_line, unescape_pattern
from tagging.scope import child_scope
from tagging.emitter import TagEmitter, TagsError, WriteError, format_tag_line
from tagging.traversal import extract_tags_from_tree, find_tags
from tagging.extractor import TaggingStats, tag_file, tag_files

__all__ = [
    # Data models
    "TagRecord",
    "TraversalContext",
    "NodeTag",
    "SyntaxNode",
    "SyntaxTree",
    "Token",
    # Low-level parsing
    "create_parser",
    "parse_file",
    "parse_bytes",
    "count_error_nodes",
    # Tag construction
    "tag_kind",
    "escape_pattern",
    "extract_line",
    "unescape_pattern",
    "child_scope",
    "TagEmitter",
    "TagsError",
    "WriteError",
    "format_tag_line",
    # Mid-level extraction
    "extract_tags_from_tree",
    "find_tags",
    # High-level orchestration
    "TaggingStats",
    "tag_file",
    "tag_files",
]
