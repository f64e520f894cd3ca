"""
Syntax tree traversal and tag emission.

This module walks the lowered Zig syntax tree, qualifies members of nested
struct / union / enum declarations with their enclosing scope and emits one
tag record per named declaration.
"""

import logging
from typing import Optional

from tagging.classifier import container_kind, tag_kind
from tagging.emitter import TagEmitter
from tagging.models import TagRecord, TraversalContext
from tagging.scope import child_scope
from tagging.syntax import NodeTag, SyntaxNode, SyntaxTree, Token
from tagging.text import escape_pattern, extract_line

logger = logging.getLogger(__name__)


def name_token(node: SyntaxNode) -> Optional[Token]:
    """Return the name token of a function, declaration or field."""
    if node.tag in (NodeTag.FN_PROTO, NodeTag.VAR_DECL, NodeTag.CONTAINER_FIELD):
        return node.name_token
    return None


def _enter_container(ctx: TraversalContext, token: Token) -> None:
    """Recurse into the members of a container-valued declaration."""
    container = ctx.node.init_node
    if container is None or container.tag is not NodeTag.CONTAINER_DECL:
        return
    if container_kind(ctx.tree, container) is None:
        logger.debug(
            "Skipping members of unsupported container at byte %d", token.start
        )
        return

    label = ctx.tree.token_slice(container.kind_token)
    scope = child_scope(ctx.scope, ctx.tree.token_slice(token))
    for member in container.members:
        find_tags(ctx.descend(member, scope_label=label, scope=scope))


def find_tags(ctx: TraversalContext) -> None:
    """Emit tags for ``ctx.node`` and, for containers, all of its members.

    A container declaration's own tag carries the scope of its parent while
    its members carry the container's scope.

    Args:
        ctx: Traversal state for the node being visited.

    Raises:
        WriteError: If the output sink fails.
    """
    node = ctx.node
    token = name_token(node)

    if token is not None and node.tag is NodeTag.VAR_DECL:
        _enter_container(ctx, token)

    if token is None:
        return

    kind = tag_kind(ctx.tree, node)
    if kind is None:
        return

    line = extract_line(ctx.tree.source, token.start)
    record = TagRecord(
        name=ctx.tree.token_slice(token),
        path=ctx.path,
        pattern=escape_pattern(line),
        kind=kind,
        scope_label=ctx.scope_label or None,
        scope=ctx.scope or None,
    )
    ctx.emitter.emit(record)


def extract_tags_from_tree(tree: SyntaxTree, path: bytes, emitter: TagEmitter) -> int:
    """Emit tags for every top-level declaration of a parsed file.

    This is the main entry point for tag extraction.

    Args:
        tree: The lowered syntax tree.
        path: File path written into every record.
        emitter: Destination for the records.

    Returns:
        Number of tags emitted for this file.
    """
    before = emitter.tags_written
    for decl in tree.decls:
        find_tags(TraversalContext(tree=tree, node=decl, path=path, emitter=emitter))
    emitted = emitter.tags_written - before
    logger.debug("Emitted %d tags", emitted)
    return emitted
