"""Command-line interface for json2lua."""

import logging
import sys
import click
from pathlib import Path
from . import __version__
from .converter import JSON2LuaConverter
from .error_handler import ErrorHandler
from .types import RootPolicy


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group()
@click.version_option(version=__version__)
def main():
    """json2lua - Convert JSON documents into Lua table literals."""
    pass


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the Lua table to this file instead of stdout')
@click.option('--wrap-root', is_flag=True,
              help='Wrap a non-object root value in a table instead of failing')
@click.option('--profile', is_flag=True, help='Report conversion timing and memory usage on stderr')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def convert(input_file: Path, output: Path, wrap_root: bool, profile: bool, verbose: bool):
    """Convert a JSON file into a Lua table."""
    _configure_logging(verbose)

    converter = JSON2LuaConverter(
        root_policy=RootPolicy.WRAP if wrap_root else RootPolicy.REJECT,
        enable_profiling=profile
    )
    result = converter.convert_file(input_file, output)

    if profile and converter.profiler.metrics_history:
        metrics = converter.profiler.metrics_history[-1]
        click.echo(f"Performance: {metrics.duration * 1000:.2f}ms, "
                   f"{metrics.input_size} -> {metrics.output_size} bytes, "
                   f"peak memory {metrics.memory_peak_mb:.1f} MB", err=True)

    if not result.success:
        click.echo(f"Error: conversion of {input_file} failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        sys.exit(1)

    if output:
        click.echo(f"Wrote {result.output_size} bytes to {output}", err=True)
    else:
        click.echo(result.lua)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--wrap-root', is_flag=True, help='Accept non-object root values')
def validate(input_file: Path, wrap_root: bool):
    """Check that a JSON file can be converted."""
    _configure_logging(False)

    try:
        json_content = input_file.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: failed to read {input_file}: {e}", err=True)
        sys.exit(1)

    result = ErrorHandler().validate_input(
        json_content,
        RootPolicy.WRAP if wrap_root else RootPolicy.REJECT
    )

    for warning in result.warnings:
        click.echo(f"Warning: {warning}", err=True)

    if not result.is_valid:
        click.echo(f"{input_file} is not convertible:", err=True)
        for error in result.errors:
            location = f" ({error.location})" if error.location else ""
            click.echo(f"   • {error.message}{location}", err=True)
        sys.exit(1)

    click.echo(f"{input_file} is valid")


if __name__ == '__main__':
    main()
