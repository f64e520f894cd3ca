"""
Tree-sitter parser initialization and lowering of Zig syntax trees.

This module parses Zig source with tree-sitter and converts the concrete
syntax tree into the small ``SyntaxTree`` model the tag extractor works on.
"""

import logging
from typing import List, Optional
import tree_sitter_zig as tszig
from tree_sitter import Language, Node, Parser, Tree

from tagging.config import (
    BUILTIN_TYPE_NODE,
    CONTAINER_KEYWORDS,
    CONTAINER_NODES,
    ERROR_SET_NODE,
    ERROR_TYPE_NAMES,
    FIELD_NODE,
    FUNCTION_NODE,
    IDENTIFIER_NODE,
    VARIABLE_NODE,
)
from tagging.syntax import NodeTag, SyntaxNode, SyntaxTree, Token

logger = logging.getLogger(__name__)

# Module-level language constant
ZIG_LANGUAGE = Language(tszig.language())


def create_parser() -> Parser:
    """Create and configure a tree-sitter parser for Zig.

    Returns:
        A Parser instance configured with the Zig language.

    Example:
        >>> parser = create_parser()
        >>> tree = parser.parse(b"fn main() void {}")
    """
    parser = Parser(ZIG_LANGUAGE)
    logger.debug("Created tree-sitter Zig parser")
    return parser


def count_error_nodes(tree: Tree) -> int:
    """Count ERROR and MISSING nodes in a parsed tree."""
    count = 0
    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            count += 1
        stack.extend(node.children)
    return count


def _token(node: Node) -> Token:
    return Token(node.start_byte, node.end_byte)


def _first_child_of_type(node: Node, node_type: str) -> Optional[Node]:
    for child in node.named_children:
        if child.type == node_type:
            return child
    return None


def _initializer(node: Node) -> Optional[Node]:
    """Return the expression after ``=`` in a variable declaration."""
    seen_equal = False
    for child in node.children:
        if seen_equal and child.is_named and not child.is_extra:
            return child
        if not child.is_named and child.type == "=":
            seen_equal = True
    return None


def _lower_function(node: Node) -> SyntaxNode:
    name = node.child_by_field_name("name")
    if name is None:
        name = _first_child_of_type(node, IDENTIFIER_NODE)
    return SyntaxNode(
        tag=NodeTag.FN_PROTO,
        name_token=_token(name) if name is not None else None,
    )


def _lower_variable(node: Node) -> SyntaxNode:
    # The declared name is the first identifier; a type annotation follows it.
    name = _first_child_of_type(node, IDENTIFIER_NODE)
    init = _initializer(node)
    return SyntaxNode(
        tag=NodeTag.VAR_DECL,
        name_token=_token(name) if name is not None else None,
        init_node=lower_node(init) if init is not None else None,
    )


def _lower_container(node: Node) -> SyntaxNode:
    kind_token = None
    for child in node.children:
        if not child.is_named and child.type in CONTAINER_KEYWORDS:
            kind_token = _token(child)
            break
    members = tuple(
        lower_node(child)
        for child in node.named_children
        if child.type in (FUNCTION_NODE, VARIABLE_NODE, FIELD_NODE)
    )
    return SyntaxNode(
        tag=NodeTag.CONTAINER_DECL,
        kind_token=kind_token,
        members=members,
    )


def _lower_field(node: Node) -> SyntaxNode:
    name = node.child_by_field_name("name")
    type_expr = node.child_by_field_name("type")
    if name is None:
        # A bare enumerant such as `red,` is parsed as a field whose only
        # child is the identifier in type position.
        if type_expr is not None and type_expr.type == IDENTIFIER_NODE:
            return SyntaxNode(
                tag=NodeTag.CONTAINER_FIELD,
                name_token=_token(type_expr),
                has_type_expr=False,
            )
        return SyntaxNode(tag=NodeTag.CONTAINER_FIELD)
    return SyntaxNode(
        tag=NodeTag.CONTAINER_FIELD,
        name_token=_token(name),
        has_type_expr=type_expr is not None,
    )


def lower_node(node: Node) -> SyntaxNode:
    """Convert one tree-sitter node into a ``SyntaxNode``.

    Node types outside the supported declaration shapes become ``OTHER``.
    """
    if node.type == FUNCTION_NODE:
        return _lower_function(node)
    if node.type == VARIABLE_NODE:
        return _lower_variable(node)
    if node.type in CONTAINER_NODES:
        return _lower_container(node)
    if node.type == FIELD_NODE:
        return _lower_field(node)
    if node.type == ERROR_SET_NODE:
        return SyntaxNode(tag=NodeTag.ERROR_SET_DECL)
    if node.type == BUILTIN_TYPE_NODE and node.text in ERROR_TYPE_NAMES:
        return SyntaxNode(tag=NodeTag.ERROR_TYPE)
    return SyntaxNode(tag=NodeTag.OTHER)


def lower_tree(tree: Tree, source: bytes) -> SyntaxTree:
    """Lower a parsed file into a ``SyntaxTree`` of its top-level declarations."""
    decls: List[SyntaxNode] = [
        lower_node(child) for child in tree.root_node.named_children
    ]
    return SyntaxTree(
        source=source,
        decls=tuple(decls),
        error_count=count_error_nodes(tree),
    )


def parse_bytes(source: bytes) -> SyntaxTree:
    """Parse raw bytes of Zig source code.

    Args:
        source: Zig source code as bytes.

    Returns:
        The lowered ``SyntaxTree``.

    Raises:
        TypeError: If source is not bytes.

    Example:
        >>> tree = parse_bytes(b"fn foo() void {}")
        >>> tree.decls[0].tag
        <NodeTag.FN_PROTO: 'fn_proto'>
    """
    if not isinstance(source, bytes):
        raise TypeError(f"Source must be bytes, got {type(source).__name__}")

    parser = create_parser()
    ts_tree = parser.parse(source)
    tree = lower_tree(ts_tree, source)

    if tree.error_count:
        logger.debug("Parsed tree contains %d syntax errors", tree.error_count)

    logger.debug("Parsed %d bytes of Zig code", len(source))
    return tree


def parse_file(file_path: str) -> SyntaxTree:
    """Parse a Zig source file from disk.

    Args:
        file_path: Path to the .zig file.

    Returns:
        The lowered ``SyntaxTree``; its ``source`` holds the file bytes.

    Raises:
        FileNotFoundError: If the file does not exist.
        IsADirectoryError: If the path names a directory.
        OSError: If the file cannot be read.
    """
    with open(file_path, "rb") as f:
        source_bytes = f.read()

    tree = parse_bytes(source_bytes)
    logger.debug("Successfully parsed file: %s", file_path)
    return tree
