"""Lua table formatter: renders a JSON value tree as a Lua table literal."""

import logging
from typing import Any, List, Optional, Union

from .parser import JSONParser
from .types import (
    FormatterInterface,
    RootPolicy,
    RootTypeError,
    ConversionError,
    ErrorType
)
from .utils.escaping import escape_string, indent


class LuaTableFormatter(FormatterInterface):
    """
    Converts JSON documents into indented Lua table literals.

    Every entry is written on its own line, indented with one tab per
    nesting level, and terminated with ``,``. Object members are emitted as
    ``["key"] = value`` in source order; array elements are emitted unkeyed
    between ``[`` and ``]``.

    Example:
        >>> LuaTableFormatter().format('{"int": 420}')
        '{\\n\\t["int"] = 420,\\n}'
    """

    def __init__(self, root_policy: RootPolicy = RootPolicy.REJECT,
                 parser: Optional[JSONParser] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the formatter.

        Args:
            root_policy: Policy applied when the root value is not an object
            parser: Optional JSONParser instance
            logger: Optional logger instance
        """
        self.root_policy = root_policy
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or JSONParser(self.logger)

    def format(self, json_text: Union[str, bytes, bytearray]) -> str:
        """
        Convert JSON text into a Lua table literal.

        Args:
            json_text: JSON document

        Returns:
            Lua table source, ending with ``}`` and no trailing newline

        Raises:
            ParseError: If the text is not valid JSON
            RootTypeError: If the root is not an object and the policy is REJECT
        """
        data = self.parser.parse(json_text)
        return self.format_value(data)

    def format_value(self, data: Any) -> str:
        """
        Render an already-parsed JSON value tree as a Lua table literal.

        Args:
            data: Parsed JSON value tree

        Returns:
            Lua table source

        Raises:
            RootTypeError: If the root is not an object and the policy is REJECT
            ConversionError: If the tree contains a non-JSON value
        """
        parts = ["{\n"]

        if isinstance(data, dict):
            for key, value in data.items():
                self.render(key, value, 1, parts)
        elif self.root_policy == RootPolicy.WRAP:
            self.logger.debug(f"Wrapping {self.parser.json_type_name(data)} root in a table")
            self.render(None, data, 1, parts)
        else:
            raise RootTypeError(self.parser.json_type_name(data))

        parts.append("}")
        return "".join(parts)

    def render(self, key: Optional[str], value: Any, depth: int, parts: List[str]) -> None:
        """
        Append one table entry to ``parts``.

        Args:
            key: Member name, or None for array elements
            value: Value to render
            depth: Nesting depth of the entry (1 inside the root table)
            parts: Output buffer
        """
        parts.append(indent(depth))

        if key is not None:
            parts.append(f'["{escape_string(self._check_key(key))}"] = ')

        if isinstance(value, str):
            parts.append(f'"{escape_string(value)}"')
        elif isinstance(value, bool):
            parts.append("true" if value else "false")
        elif isinstance(value, int):
            parts.append(str(value))
        elif isinstance(value, float):
            parts.append(repr(value))
        elif value is None:
            parts.append("nil")
        elif isinstance(value, list):
            parts.append("[\n")
            for item in value:
                self.render(None, item, depth + 1, parts)
            parts.append(indent(depth))
            parts.append("]")
        elif isinstance(value, dict):
            parts.append("{\n")
            for member_key, member_value in value.items():
                self.render(member_key, member_value, depth + 1, parts)
            parts.append(indent(depth))
            parts.append("}")
        else:
            raise ConversionError(
                f"Unsupported value type: {type(value).__name__}",
                ErrorType.VALUE,
                context={"key": key, "depth": depth}
            )

        parts.append(",\n")

    @staticmethod
    def _check_key(key: Any) -> str:
        if not isinstance(key, str):
            raise ConversionError(
                f"Object keys must be strings, got {type(key).__name__}",
                ErrorType.VALUE,
                context={"key": key}
            )
        return key


def format_json(json_text: Union[str, bytes, bytearray],
                root_policy: RootPolicy = RootPolicy.REJECT) -> str:
    """
    Convert JSON text into a Lua table literal.

    Args:
        json_text: JSON document
        root_policy: Policy applied when the root value is not an object

    Returns:
        Lua table source
    """
    return LuaTableFormatter(root_policy=root_policy).format(json_text)
