"""
Classification of syntax nodes into single-character tag kinds.
"""

from typing import Optional

from tagging.config import (
    CONTAINER_KIND_MAP,
    KIND_ENUM_FIELD,
    KIND_ERROR_SET,
    KIND_FUNCTION,
    KIND_MEMBER,
    KIND_VARIABLE,
)
from tagging.syntax import NodeTag, SyntaxNode, SyntaxTree


def container_kind(tree: SyntaxTree, container: SyntaxNode) -> Optional[str]:
    """Map a container's keyword to a kind, or None for unknown keywords."""
    if container.kind_token is None:
        return None
    return CONTAINER_KIND_MAP.get(tree.token_slice(container.kind_token))


def _var_decl_kind(tree: SyntaxTree, node: SyntaxNode) -> Optional[str]:
    init = node.init_node
    if init is None:
        return KIND_VARIABLE
    if init.tag is NodeTag.CONTAINER_DECL:
        return container_kind(tree, init)
    if init.tag in (NodeTag.ERROR_SET_DECL, NodeTag.ERROR_TYPE):
        return KIND_ERROR_SET
    return KIND_VARIABLE


def _field_kind(tree: SyntaxTree, node: SyntaxNode) -> Optional[str]:
    # Enumerants never carry a type expression while struct and union
    # members always do.
    if node.has_type_expr:
        return KIND_MEMBER
    return KIND_ENUM_FIELD


def _no_kind(tree: SyntaxTree, node: SyntaxNode) -> Optional[str]:
    return None


_KIND_DISPATCH = {
    NodeTag.FN_PROTO: lambda tree, node: KIND_FUNCTION,
    NodeTag.VAR_DECL: _var_decl_kind,
    NodeTag.CONTAINER_FIELD: _field_kind,
    NodeTag.CONTAINER_DECL: _no_kind,
    NodeTag.ERROR_SET_DECL: _no_kind,
    NodeTag.ERROR_TYPE: _no_kind,
    NodeTag.OTHER: _no_kind,
}


def tag_kind(tree: SyntaxTree, node: SyntaxNode) -> Optional[str]:
    """Return the kind character for ``node``, or None if it is not tagged.

    Args:
        tree: Tree the node belongs to, used to read keyword tokens.
        node: Node to classify.

    Returns:
        One of ``f s u g r v e m`` or None.
    """
    return _KIND_DISPATCH[node.tag](tree, node)
