"""Utility functions for json2lua."""

from .escaping import escape_string, indent
from .validation import ValidationUtils

__all__ = ["escape_string", "indent", "ValidationUtils"]
