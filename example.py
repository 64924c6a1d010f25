#!/usr/bin/env python3
"""
Example usage of json2lua.

Converts a small mod configuration document into a Lua table and shows
how conversion errors are reported.
"""

import json
import logging

from json2lua import JSON2LuaConverter, LuaTableFormatter, ParseError, RootPolicy


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO)

    print("json2lua Example")
    print("=" * 50)

    config = {
        "name": "Better Crafting",
        "version": 3,
        "scale": 1.5,
        "enabled": True,
        "icon": None,
        "recipes": [
            {"id": "torch", "cost": {"wood": 1, "coal": 1}},
            {"id": "lantern", "cost": {"iron": 2, "torch": 1}},
        ],
        "description": "Line one\nLine two with \"quotes\"",
    }

    formatter = LuaTableFormatter()
    lua = formatter.format(json.dumps(config))
    print("local config = " + lua)
    print("return config")
    print()

    # Failures are raised by the formatter...
    try:
        formatter.format('{"broken": }')
    except ParseError as e:
        print(f"ParseError: {e} (line {e.lineno}, column {e.colno})")

    # ...and reported as results by the converter
    converter = JSON2LuaConverter(root_policy=RootPolicy.WRAP, enable_profiling=True)
    result = converter.convert('["a", "b"]')
    print(f"Wrapped array root ({result.output_size} bytes):")
    print(result.lua)
    print(converter.profiler.get_performance_summary())


if __name__ == "__main__":
    main()
