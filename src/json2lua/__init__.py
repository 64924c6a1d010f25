"""
json2lua - Convert JSON documents into Lua table literals.

Every object member is emitted as a bracketed string key, in source order,
so the output can be loaded by Lua code without a JSON parser.
"""

__version__ = "1.0.0"

from .formatter import LuaTableFormatter, format_json
from .converter import JSON2LuaConverter
from .types import (
    ConversionResult,
    ConversionError,
    ParseError,
    RootTypeError,
    RootPolicy,
    ErrorType,
)

__all__ = [
    "LuaTableFormatter",
    "format_json",
    "JSON2LuaConverter",
    "ConversionResult",
    "ConversionError",
    "ParseError",
    "RootTypeError",
    "RootPolicy",
    "ErrorType",
]
