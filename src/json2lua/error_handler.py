"""Error handling implementation for json2lua."""

import logging
from pathlib import Path
from typing import Optional

from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ConversionError,
    ErrorType,
    RootPolicy
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for conversion operations.

    Validates input ahead of conversion and turns conversion errors into
    user-facing responses.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str,
                       root_policy: RootPolicy = RootPolicy.REJECT) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate
            root_policy: Policy applied to non-object roots

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data, root_policy)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """
        Handle conversion errors and suggest a fix.

        Args:
            error: ConversionError to handle

        Returns:
            ErrorResponse with a suggested action
        """
        self.logger.error(f"Conversion error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Fix the JSON syntax at the reported position and retry."
            )
        elif error.error_type == ErrorType.ROOT_TYPE:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Wrap the document in a JSON object, "
                                 "or convert with the wrap root policy."
            )
        elif error.error_type == ErrorType.VALUE:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Only JSON values (dict, list, str, int, float, bool, None) "
                                 "with string keys can be converted."
            )
        elif error.error_type == ErrorType.FILESYSTEM:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Check that the input file exists and that the output "
                                 "location is writable."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry."
            )

    def validate_output_path(self, path: str) -> ValidationResult:
        """
        Validate an output file path.

        Args:
            path: File path the Lua output will be written to

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not path:
            errors.append(ValidationError(
                type=ErrorType.FILESYSTEM,
                message="Output path cannot be empty",
                location="path"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            resolved_path = Path(path).resolve()

            if resolved_path.is_dir():
                errors.append(ValidationError(
                    type=ErrorType.FILESYSTEM,
                    message="Output path is a directory",
                    location="path"
                ))
            elif not resolved_path.parent.is_dir():
                errors.append(ValidationError(
                    type=ErrorType.FILESYSTEM,
                    message=f"Output directory does not exist: {resolved_path.parent}",
                    location="path"
                ))
            elif resolved_path.exists():
                warnings.append(f"Output file {resolved_path} will be overwritten.")

        except (OSError, ValueError) as e:
            errors.append(ValidationError(
                type=ErrorType.FILESYSTEM,
                message=f"Invalid output path: {str(e)}",
                location="path"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
