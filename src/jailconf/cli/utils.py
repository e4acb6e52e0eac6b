"""
jailconf CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
import sys
from pathlib import Path

import typer

from jailconf._version import get_version


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"jailconf {get_version()}")
        typer.echo(f"Python {python_version} ({python_impl})")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Send debug logging to stderr when ``--verbose`` is given."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )


def read_source(file: Path | None) -> tuple[str, Path | None]:
    """Read a config file, or stdin when ``file`` is None or ``-``."""
    if file is None or str(file) == "-":
        return sys.stdin.read(), None
    return file.read_text(encoding="utf-8"), file
