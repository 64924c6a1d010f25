"""Tests for error handler."""

from json2lua.error_handler import ErrorHandler
from json2lua.types import ConversionError, ErrorType, ParseError, RootTypeError


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_input_valid_json(self):
        """Test validation of valid JSON input."""
        result = self.error_handler.validate_input('{"users": {"user1": {"name": "Alice"}}}')

        assert result.is_valid
        assert len(result.errors) == 0

    def test_validate_input_invalid_json(self):
        """Test validation of invalid JSON input."""
        result = self.error_handler.validate_input('{"users": {"user1": {"name": "Alice"}')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX

    def test_validate_input_unexpected_error(self):
        """Test that unexpected validation failures are reported, not raised."""
        result = self.error_handler.validate_input(None)

        assert not result.is_valid
        assert "unexpected error" in result.errors[0].message

    def test_handle_parse_error(self):
        """Test handling of parse errors."""
        response = self.error_handler.handle_conversion_error(ParseError("bad json"))

        assert not response.can_recover
        assert "syntax" in response.suggested_action.lower()

    def test_handle_root_type_error(self):
        """Test handling of root type errors."""
        response = self.error_handler.handle_conversion_error(RootTypeError("array"))

        assert response.can_recover
        assert "wrap" in response.suggested_action.lower()

    def test_handle_value_error(self):
        """Test handling of unsupported value errors."""
        error = ConversionError("Unsupported value type: set", ErrorType.VALUE)

        response = self.error_handler.handle_conversion_error(error)

        assert not response.can_recover

    def test_handle_filesystem_error(self):
        """Test handling of filesystem errors."""
        error = ConversionError("Permission denied", ErrorType.FILESYSTEM)

        response = self.error_handler.handle_conversion_error(error)

        assert response.can_recover
        assert "writable" in response.suggested_action

    def test_validate_output_path_valid(self, temp_dir):
        """Test validation of a writable output path."""
        result = self.error_handler.validate_output_path(str(temp_dir / "out.lua"))

        assert result.is_valid
        assert result.warnings == []

    def test_validate_output_path_existing_file(self, temp_dir):
        """Test that overwriting an existing file produces a warning."""
        path = temp_dir / "out.lua"
        path.write_text("{}")

        result = self.error_handler.validate_output_path(str(path))

        assert result.is_valid
        assert "overwritten" in result.warnings[0]

    def test_validate_output_path_directory(self, temp_dir):
        """Test that a directory is not a valid output path."""
        result = self.error_handler.validate_output_path(str(temp_dir))

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.FILESYSTEM

    def test_validate_output_path_missing_parent(self, temp_dir):
        """Test that a missing parent directory is reported."""
        result = self.error_handler.validate_output_path(str(temp_dir / "missing" / "out.lua"))

        assert not result.is_valid
        assert "does not exist" in result.errors[0].message

    def test_validate_output_path_empty(self):
        """Test validation of empty output path."""
        result = self.error_handler.validate_output_path("")

        assert not result.is_valid
