"""Core type definitions for json2lua."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    ROOT_TYPE = "root_type"
    VALUE = "value"
    FILESYSTEM = "filesystem"


class RootPolicy(Enum):
    """How a document whose root is not a JSON object is treated."""
    REJECT = "reject"
    WRAP = "wrap"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ConversionResult:
    """Result of a JSON to Lua conversion."""
    success: bool
    lua: str
    input_size: int
    output_size: int
    errors: Optional[List[str]] = None


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class ConversionError(Exception):
    """Base exception for conversion errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class ParseError(ConversionError):
    """Raised when the input text is not well-formed JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None,
                 colno: Optional[int] = None, pos: Optional[int] = None):
        super().__init__(message, ErrorType.SYNTAX)
        self.lineno = lineno
        self.colno = colno
        self.pos = pos


class RootTypeError(ConversionError):
    """Raised when the parsed root value is not a JSON object."""

    def __init__(self, root_type: str):
        super().__init__(
            f"Root element must be an object, got {root_type}",
            ErrorType.ROOT_TYPE,
        )
        self.root_type = root_type


# Abstract base classes for interfaces

class FormatterInterface(ABC):
    """Abstract interface for the Lua table formatter."""

    @abstractmethod
    def format(self, json_text: str) -> str:
        """Convert JSON text into a Lua table literal."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str, root_policy: RootPolicy) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """Handle conversion errors."""
        pass
