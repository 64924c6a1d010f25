"""Tests for the command-line interface."""

from click.testing import CliRunner
from json2lua import __version__
from json2lua.cli import main


class TestCLI:
    """Tests for the json2lua command group."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_version(self):
        """Test the version option."""
        result = self.runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_convert_to_stdout(self, json_file, all_values_lua):
        """Test converting a file to stdout."""
        result = self.runner.invoke(main, ["convert", str(json_file)])

        assert result.exit_code == 0
        assert all_values_lua in result.output

    def test_convert_to_file(self, json_file, temp_dir, all_values_lua):
        """Test converting a file to an output file."""
        output_path = temp_dir / "out.lua"

        result = self.runner.invoke(main, ["convert", str(json_file), "-o", str(output_path)])

        assert result.exit_code == 0
        assert output_path.read_text(encoding="utf-8") == all_values_lua

    def test_convert_invalid_json(self, temp_dir):
        """Test that a conversion failure exits with status 1."""
        input_path = temp_dir / "bad.json"
        input_path.write_text('{"a": }', encoding="utf-8")

        result = self.runner.invoke(main, ["convert", str(input_path)])

        assert result.exit_code == 1
        assert "JSON parsing failed" in result.output

    def test_convert_wrap_root(self, temp_dir):
        """Test the wrap-root flag."""
        input_path = temp_dir / "list.json"
        input_path.write_text("[true]", encoding="utf-8")

        rejected = self.runner.invoke(main, ["convert", str(input_path)])
        wrapped = self.runner.invoke(main, ["convert", str(input_path), "--wrap-root"])

        assert rejected.exit_code == 1
        assert wrapped.exit_code == 0
        assert "{\n\t[\n\t\ttrue,\n\t],\n}" in wrapped.output

    def test_convert_profile_reports_metrics(self, json_file, all_values_json, all_values_lua):
        """Test that --profile prints a performance line without --verbose."""
        result = self.runner.invoke(main, ["convert", str(json_file), "--profile"])

        assert result.exit_code == 0
        assert "Performance:" in result.output
        assert f"{len(all_values_json)} -> {len(all_values_lua)} bytes" in result.output
        assert all_values_lua in result.output

    def test_convert_without_profile_has_no_metrics(self, json_file):
        """Test that no performance line is printed by default."""
        result = self.runner.invoke(main, ["convert", str(json_file)])

        assert "Performance:" not in result.output

    def test_validate_valid_file(self, json_file):
        """Test validating a convertible file."""
        result = self.runner.invoke(main, ["validate", str(json_file)])

        assert result.exit_code == 0
        assert "is valid" in result.output

    def test_validate_invalid_file(self, temp_dir):
        """Test validating a non-convertible file."""
        input_path = temp_dir / "scalar.json"
        input_path.write_text("42", encoding="utf-8")

        result = self.runner.invoke(main, ["validate", str(input_path)])

        assert result.exit_code == 1
        assert "Root element must be an object" in result.output
