"""Validation utilities for JSON input."""

from typing import Any, List, Tuple

from ..parser import JSONParser
from ..types import ValidationResult, ValidationError, ErrorType, ParseError, RootPolicy

MAX_RECOMMENDED_DEPTH = 100


class ValidationUtils:
    """Utility class for validating JSON input before conversion."""

    @staticmethod
    def validate_json_string(json_string: str,
                             root_policy: RootPolicy = RootPolicy.REJECT) -> ValidationResult:
        """
        Validate JSON string syntax and structure.

        Args:
            json_string: JSON string to validate
            root_policy: Policy applied to non-object roots

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        parser = JSONParser()
        try:
            data = parser.parse(json_string)
        except ParseError as e:
            location = f"line {e.lineno}, column {e.colno}" if e.lineno is not None else "input"
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=str(e),
                location=location
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        structure_errors, structure_warnings = ValidationUtils._validate_json_structure(
            parser, data, root_policy
        )
        errors.extend(structure_errors)
        warnings.extend(structure_warnings)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _validate_json_structure(parser: JSONParser, data: Any,
                                 root_policy: RootPolicy) -> Tuple[List[ValidationError], List[str]]:
        """Validate the root type and nesting of parsed data."""
        errors = []
        warnings = []

        if not isinstance(data, dict):
            root_type = parser.json_type_name(data)
            if root_policy == RootPolicy.REJECT:
                errors.append(ValidationError(
                    type=ErrorType.ROOT_TYPE,
                    message=f"Root element must be an object, got {root_type}",
                    location="root"
                ))
                return errors, warnings
            warnings.append(f"Root element is {root_type}; it will be wrapped in a table.")

        max_depth = parser.calculate_nesting_depth(data)
        if max_depth > MAX_RECOMMENDED_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). "
                            "Conversion may exhaust the interpreter stack.")

        return errors, warnings
