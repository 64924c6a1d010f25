"""String escaping and indentation helpers for Lua output."""

# Only these five characters are rewritten; everything else is emitted as-is.
_LUA_ESCAPES = str.maketrans({
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\\": "\\\\",
    '"': '\\"',
})

INDENT_UNIT = "\t"


def escape_string(value: str) -> str:
    """
    Escape a string for use inside a double-quoted Lua string literal.

    Newline, tab, carriage return, backslash and double quote are replaced
    by their two-character escape sequences. Other control characters and
    non-ASCII text pass through unchanged.

    Args:
        value: Raw string content

    Returns:
        Escaped string content, without surrounding quotes
    """
    return value.translate(_LUA_ESCAPES)


def indent(depth: int) -> str:
    """Return ``depth`` tab characters."""
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    return INDENT_UNIT * depth
