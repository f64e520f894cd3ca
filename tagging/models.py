"""
Data models for tag extraction.
"""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from tagging.config import TAG_KINDS
from tagging.syntax import SyntaxNode, SyntaxTree

if TYPE_CHECKING:
    from tagging.emitter import TagEmitter


@dataclass(frozen=True)
class TagRecord:
    """A single tag line before serialization.

    Attributes:
        name: Symbol name.
        path: File path exactly as given on the command line.
        pattern: Source line of the definition, already escaped.
        kind: Single character kind (see ``tagging.config.TAG_KINDS``).
        scope_label: Keyword of the enclosing container, or None at top level.
        scope: Dotted path of enclosing containers, or None at top level.
    """

    name: bytes
    path: bytes
    pattern: bytes
    kind: str
    scope_label: Optional[bytes] = None
    scope: Optional[bytes] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Tag name must not be empty")
        if not self.pattern:
            raise ValueError("Tag pattern must not be empty")
        if len(self.kind) != 1 or self.kind not in TAG_KINDS:
            raise ValueError(f"Unknown tag kind {self.kind!r}")
        if (self.scope_label is None) != (self.scope is None):
            raise ValueError("Scope label and scope path must be set together")

    @property
    def has_scope(self) -> bool:
        return self.scope is not None


@dataclass(frozen=True)
class TraversalContext:
    """State threaded through one step of the recursive traversal.

    ``scope_label`` and ``scope`` are both empty at the root and both
    non-empty inside a container's members.
    """

    tree: SyntaxTree
    node: SyntaxNode
    path: bytes
    emitter: "TagEmitter"
    scope_label: bytes = b""
    scope: bytes = b""

    def descend(
        self,
        node: SyntaxNode,
        scope_label: Optional[bytes] = None,
        scope: Optional[bytes] = None,
    ) -> "TraversalContext":
        """Context for a child node, optionally entering a new scope."""
        if scope is None:
            return replace(self, node=node)
        return replace(self, node=node, scope_label=scope_label, scope=scope)
