"""
jailconf CLI Package.

- commands.py: parse and validate commands
- utils.py: Shared utilities (version, logging, input)
"""

import typer

from jailconf.cli.commands import parse_command, validate_command
from jailconf.cli.utils import version_callback

app = typer.Typer(
    help="jailconf - parse and check FreeBSD jail.conf files",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """jailconf CLI main callback for global options."""
    pass


app.command(name="parse")(parse_command)
app.command(name="validate")(validate_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "app",
    "main",
    "parse_command",
    "validate_command",
]
