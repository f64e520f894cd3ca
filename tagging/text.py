"""Source line extraction and search-pattern escaping."""

_ESCAPED = (b"/", b"\\")


def extract_line(source: bytes, offset: int) -> bytes:
    """Return the line containing byte ``offset``, without its newline."""
    start = source.rfind(b"\n", 0, offset) + 1
    end = source.find(b"\n", offset)
    if end < 0:
        end = len(source)
    return source[start:end]


def escape_pattern(line: bytes) -> bytes:
    """Backslash-escape every ``/`` and ``\\`` so the line fits in /^...$/."""
    result = bytearray()
    for byte in line:
        if byte in (0x2F, 0x5C):
            result.append(0x5C)
        result.append(byte)
    return bytes(result)


def unescape_pattern(pattern: bytes) -> bytes:
    """Invert ``escape_pattern``."""
    result = bytearray()
    i = 0
    while i < len(pattern):
        if pattern[i:i + 1] == b"\\" and pattern[i + 1:i + 2] in _ESCAPED:
            i += 1
        result.append(pattern[i])
        i += 1
    return bytes(result)
