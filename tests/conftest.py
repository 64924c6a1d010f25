"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def all_values_json():
    """JSON document covering every value kind."""
    return '''{
  "string": "str",
  "int": 420,
  "float": 4.2,
  "bool": true,
  "null": null,
  "array": [
    "string",
    12345,
    false,
    {
      "k": "v"
    }
  ],
  "object": {
    "key": "value"
  }
}'''


@pytest.fixture
def all_values_lua():
    """Expected Lua rendering of ``all_values_json``."""
    return (
        '{\n'
        '\t["string"] = "str",\n'
        '\t["int"] = 420,\n'
        '\t["float"] = 4.2,\n'
        '\t["bool"] = true,\n'
        '\t["null"] = nil,\n'
        '\t["array"] = [\n'
        '\t\t"string",\n'
        '\t\t12345,\n'
        '\t\tfalse,\n'
        '\t\t{\n'
        '\t\t\t["k"] = "v",\n'
        '\t\t},\n'
        '\t],\n'
        '\t["object"] = {\n'
        '\t\t["key"] = "value",\n'
        '\t},\n'
        '}'
    )


@pytest.fixture
def json_file(temp_dir, all_values_json):
    """JSON file on disk containing ``all_values_json``."""
    path = temp_dir / "input.json"
    path.write_text(all_values_json, encoding="utf-8")
    return path
