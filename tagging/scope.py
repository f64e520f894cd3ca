"""Scope path computation for nested containers."""

from tagging.config import SCOPE_SEPARATOR


def child_scope(scope: bytes, container_name: bytes) -> bytes:
    """Build the dotted scope path seen by a container's direct members.

    Args:
        scope: Scope path of the container declaration itself, may be empty.
        container_name: Name of the container declaration.

    Returns:
        ``container_name`` at top level, else ``scope + "." + container_name``.
    """
    if not scope:
        return container_name
    return scope + SCOPE_SEPARATOR + container_name
