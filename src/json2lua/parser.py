"""Order-preserving JSON parser."""

import json
import logging
import math
from typing import Any, Optional, Union

from .types import ParseError


def _reject_constant(name: str) -> Any:
    raise ParseError(f"JSON parsing failed: {name} is not a valid JSON value")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ParseError(f"JSON parsing failed: number out of range: {text}")
    return value


class JSONParser:
    """
    Strict JSON parser producing an ordered value tree.

    Objects become ``dict`` instances whose iteration order is the order
    keys appear in the source text. A repeated key keeps the position of its
    first occurrence and the value of its last. The non-standard constants
    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected, as are numbers too
    large to be represented as a float. Bytes that are not valid UTF-8 and
    strings holding lone surrogate escapes such as ``"\\ud800"`` are
    rejected too.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: Union[str, bytes, bytearray]) -> Any:
        """
        Parse JSON text into a value tree.

        Args:
            json_string: JSON text to parse

        Returns:
            Parsed value tree

        Raises:
            ParseError: If the text is not valid JSON
            TypeError: If the input is not text
        """
        if not isinstance(json_string, (str, bytes, bytearray)):
            raise TypeError(f"JSON input must be str, bytes or bytearray, "
                            f"got {type(json_string).__name__}")

        try:
            data = json.loads(
                json_string,
                parse_float=_parse_float,
                parse_constant=_reject_constant,
            )
        except json.JSONDecodeError as e:
            raise ParseError(
                f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}",
                lineno=e.lineno,
                colno=e.colno,
                pos=e.pos,
            ) from e
        except UnicodeDecodeError as e:
            raise ParseError(
                f"JSON parsing failed: invalid {e.encoding} byte at position {e.start}",
                pos=e.start,
            ) from e

        self._check_strings(data)

        self.logger.debug(f"Parsed JSON with root type: {self.json_type_name(data)}")
        return data

    def _check_strings(self, data: Any) -> None:
        """Reject keys and strings containing lone surrogates."""
        if isinstance(data, str):
            try:
                data.encode("utf-8")
            except UnicodeEncodeError as e:
                raise ParseError(
                    f"JSON parsing failed: lone surrogate {data[e.start]!r} in string"
                ) from e
        elif isinstance(data, dict):
            for key, value in data.items():
                self._check_strings(key)
                self._check_strings(value)
        elif isinstance(data, list):
            for item in data:
                self._check_strings(item)

    @staticmethod
    def json_type_name(value: Any) -> str:
        """Return the JSON type name of a parsed value."""
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "boolean"
        if isinstance(value, (int, float)):
            return "number"
        if isinstance(value, str):
            return "string"
        if isinstance(value, list):
            return "array"
        if isinstance(value, dict):
            return "object"
        return type(value).__name__

    def calculate_nesting_depth(self, data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth of data structure."""
        if not isinstance(data, (dict, list)):
            return current_depth

        children = data.values() if isinstance(data, dict) else data
        max_child_depth = current_depth + 1
        for child in children:
            max_child_depth = max(
                max_child_depth,
                self.calculate_nesting_depth(child, current_depth + 1)
            )

        return max_child_depth
