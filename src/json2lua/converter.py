"""High-level JSON to Lua conversion with result reporting."""

import logging
from contextlib import nullcontext
from pathlib import Path
from typing import Optional, Union

from .types import (
    ConversionResult,
    ConversionError,
    ErrorType,
    RootPolicy
)
from .parser import JSONParser
from .formatter import LuaTableFormatter
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler


class JSON2LuaConverter:
    """
    Converts JSON documents and files into Lua table source.

    Unlike ``LuaTableFormatter.format``, conversion failures are reported
    through ``ConversionResult.errors`` instead of being raised. Output is
    all-or-nothing: a failed conversion carries an empty ``lua`` string.
    """

    def __init__(self, root_policy: RootPolicy = RootPolicy.REJECT,
                 logger: Optional[logging.Logger] = None,
                 enable_profiling: bool = False):
        """
        Initialize the converter.

        Args:
            root_policy: Policy applied when the root value is not an object
            logger: Optional logger instance
            enable_profiling: Record duration and memory usage of each conversion
        """
        self.root_policy = root_policy
        self.logger = logger or logging.getLogger(__name__)
        self.enable_profiling = enable_profiling

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.logger)
        self.formatter = LuaTableFormatter(
            root_policy=root_policy,
            parser=self.parser,
            logger=self.logger
        )
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def convert(self, json_string: Union[str, bytes, bytearray]) -> ConversionResult:
        """
        Convert a JSON string into Lua table source.

        Args:
            json_string: JSON document

        Returns:
            ConversionResult with the Lua source or the errors encountered
        """
        input_size = len(json_string.encode("utf-8", "surrogatepass")) \
            if isinstance(json_string, str) \
            else len(json_string)

        profile = self.profiler.profile_operation("json_to_lua", input_size) \
            if self.profiler else nullcontext()

        with profile as profiler:
            try:
                data = self.parser.parse(json_string)
                if profiler is not None:
                    profiler.sample_performance()
                lua = self.formatter.format_value(data)
            except ConversionError as e:
                response = self.error_handler.handle_conversion_error(e)
                self.logger.debug(f"Suggested action: {response.suggested_action}")
                return ConversionResult(
                    success=False,
                    lua="",
                    input_size=input_size,
                    output_size=0,
                    errors=[str(e)]
                )

            output_size = len(lua.encode("utf-8"))
            if profiler is not None:
                profiler.sample_performance()
                profiler.output_size = output_size

        self.logger.info(f"Converted {input_size} bytes of JSON into {output_size} bytes of Lua")
        return ConversionResult(
            success=True,
            lua=lua,
            input_size=input_size,
            output_size=output_size
        )

    def convert_file(self, input_path: Union[str, Path],
                     output_path: Optional[Union[str, Path]] = None) -> ConversionResult:
        """
        Convert a JSON file, optionally writing the Lua source to a file.

        Args:
            input_path: Path of the UTF-8 encoded JSON file
            output_path: Optional path the Lua source is written to

        Returns:
            ConversionResult with the Lua source or the errors encountered
        """
        if output_path is not None:
            path_validation = self.error_handler.validate_output_path(str(output_path))
            if not path_validation.is_valid:
                return self._failure([error.message for error in path_validation.errors])

        try:
            json_string = Path(input_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return self._filesystem_failure(f"Failed to read {input_path}: {e}")

        result = self.convert(json_string)
        if not result.success or output_path is None:
            return result

        try:
            Path(output_path).write_text(result.lua, encoding="utf-8")
        except OSError as e:
            return self._filesystem_failure(f"Failed to write {output_path}: {e}")

        self.logger.info(f"Wrote Lua table to {output_path}")
        return result

    def _filesystem_failure(self, message: str) -> ConversionResult:
        error = ConversionError(message, ErrorType.FILESYSTEM)
        self.error_handler.handle_conversion_error(error)
        return self._failure([message])

    @staticmethod
    def _failure(errors) -> ConversionResult:
        return ConversionResult(
            success=False,
            lua="",
            input_size=0,
            output_size=0,
            errors=errors
        )
