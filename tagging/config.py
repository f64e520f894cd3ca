"""
Configuration constants for Zig tag extraction.

Defines the tree-sitter node type strings consumed by the lowering pass, the
tag kind alphabet and the shell helper printed with the usage text.
"""

from typing import Dict, Set

FUNCTION_NODE: str = "function_declaration"
VARIABLE_NODE: str = "variable_declaration"
FIELD_NODE: str = "container_field"
ERROR_SET_NODE: str = "error_set_declaration"
IDENTIFIER_NODE: str = "identifier"
BUILTIN_TYPE_NODE: str = "builtin_type"

# Container declarations and the keyword tokens that open them
CONTAINER_NODES: Set[str] = {
    "struct_declaration",
    "union_declaration",
    "enum_declaration",
    "opaque_declaration",
}

CONTAINER_KEYWORDS: Set[str] = {
    "struct",
    "union",
    "enum",
    "opaque",
}

# Builtin types that denote an error set
ERROR_TYPE_NAMES: Set[bytes] = {
    b"anyerror",
}

# Container keyword -> kind of the declaration that names the container
CONTAINER_KIND_MAP: Dict[bytes, str] = {
    b"struct": "s",
    b"union": "u",
    b"enum": "g",
}

KIND_FUNCTION: str = "f"
KIND_ERROR_SET: str = "r"
KIND_VARIABLE: str = "v"
KIND_ENUM_FIELD: str = "e"
KIND_MEMBER: str = "m"

TAG_KINDS: str = "fsugrvem"

SCOPE_SEPARATOR: bytes = b"."

# Printed on stdout together with the usage text; {program} is substituted.
SORT_HELPER_SCRIPT: str = """\
#!/usr/bin/env bash
# Usage: ./ztags.sh FILE... > tags
set -euo pipefail
printf '!_TAG_FILE_FORMAT\\t2\\t/extended format/\\n'
printf '!_TAG_FILE_SORTED\\t1\\t/0=unsorted, 1=sorted, 2=foldcase/\\n'
{program} "$@" | LC_ALL=C sort -u
"""
