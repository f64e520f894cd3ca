"""
Parser-independent syntax tree used by the tag extractor.

The tree-sitter concrete syntax tree is lowered into this small, closed set of
node shapes so the classifier and traversal never depend on grammar details.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class NodeTag(enum.Enum):
    """Discriminator for the supported node shapes."""

    FN_PROTO = "fn_proto"
    VAR_DECL = "var_decl"
    CONTAINER_DECL = "container_decl"
    CONTAINER_FIELD = "container_field"
    ERROR_SET_DECL = "error_set_decl"
    ERROR_TYPE = "error_type"
    OTHER = "other"


@dataclass(frozen=True)
class Token:
    """Byte span of a single token in the source buffer."""

    start: int
    end: int


@dataclass(frozen=True)
class SyntaxNode:
    """A lowered syntax node.

    Attributes:
        tag: Node shape.
        name_token: Name of a function, declaration or field, if any.
        init_node: Initializer expression of a declaration.
        kind_token: Keyword token (``struct``, ``union``, ...) of a container.
        has_type_expr: Whether a container field carries a type expression.
        members: Ordered fields and declarations of a container.
    """

    tag: NodeTag
    name_token: Optional[Token] = None
    init_node: Optional["SyntaxNode"] = None
    kind_token: Optional[Token] = None
    has_type_expr: bool = False
    members: Tuple["SyntaxNode", ...] = ()


@dataclass(frozen=True)
class SyntaxTree:
    """Lowered tree for one source file."""

    source: bytes
    decls: Tuple[SyntaxNode, ...]
    error_count: int = 0

    def token_slice(self, token: Token) -> bytes:
        return self.source[token.start:token.end]
