"""
Parse and validate commands for the jailconf CLI.

- parse: Print the parsed Document of one file (or stdin)
- validate: Check that files parse, report the first error of each
"""

from __future__ import annotations

from pathlib import Path

import typer

from jailconf.cli.utils import read_source, setup_logging
from jailconf.core import ir
from jailconf.core.errors import ConfigError, JailconfError, ParseError
from jailconf.core.options import resolve_options
from jailconf.core.parser import parse


# =============================================================================
# Helper Functions
# =============================================================================


def _format_parameter(param: ir.Parameter) -> str:
    if param.operator == ir.ParamOperator.PRESENCE:
        return f"{param.key} [presence]"
    return f"{param.key} [{param.operator.value}] {param.value!r}"


def render_tree(document: ir.Document) -> str:
    """Render a Document as an indented tree for human reading."""
    lines: list[str] = []

    for param in document.parameters:
        lines.append(_format_parameter(param))

    for block in document.blocks:
        label = "(default)" if block.is_default else ""
        lines.append(f"{block.name} {label}".rstrip())
        for param in block.parameters:
            lines.append(f"  {_format_parameter(param)}")

    return "\n".join(lines)


def _print_vscode_parse_error(error: ParseError, root: Path) -> None:
    """Print parse error in VS Code format with location info."""
    if error.context and error.context.file:
        try:
            rel_path = Path(error.context.file).relative_to(root)
        except ValueError:
            rel_path = Path(error.context.file)

        line = error.context.line or 1
        col = error.context.column or 1
        typer.echo(f"{rel_path}:{line}:{col}: error: {error.message}", err=True)
    else:
        typer.echo(f"::error: {error.message}", err=True)


# =============================================================================
# Commands
# =============================================================================


def parse_command(
    file: Path | None = typer.Argument(  # noqa: B008
        None, help="jail.conf file to parse (default: stdin)"
    ),
    format: str = typer.Option("json", "--format", "-f", help="Output format: 'json' or 'tree'"),
    config: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="Options file (default: ./jailconf.toml if present)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Parse a jail.conf file and print the resulting document.
    """
    setup_logging(verbose)

    if format not in ("json", "tree"):
        typer.echo(f"Unknown format: {format!r} (expected 'json' or 'tree')", err=True)
        raise typer.Exit(code=2)

    try:
        options = resolve_options(config)
        text, path = read_source(file)
        document = parse(text, file=path, options=options)
    except ParseError as e:
        typer.echo(f"Parse error [{e.kind}]: {e}", err=True)
        raise typer.Exit(code=1)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if format == "tree":
        typer.echo(render_tree(document))
    else:
        typer.echo(document.model_dump_json(indent=2))


def validate_command(
    files: list[Path] = typer.Argument(..., help="jail.conf files to check"),  # noqa: B008
    format: str = typer.Option(
        "human", "--format", "-f", help="Output format: 'human' or 'vscode'"
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="Options file (default: ./jailconf.toml if present)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Check that each file parses. Exits 1 if any file fails.
    """
    setup_logging(verbose)
    root = Path.cwd()

    if format not in ("human", "vscode"):
        typer.echo(f"Unknown format: {format!r} (expected 'human' or 'vscode')", err=True)
        raise typer.Exit(code=2)

    try:
        options = resolve_options(config)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)

    failed = 0
    for f in files:
        try:
            text, path = read_source(f)
            document = parse(text, file=path, options=options)
        except ParseError as e:
            failed += 1
            if format == "vscode":
                _print_vscode_parse_error(e, root)
            else:
                typer.echo(f"{f}: parse error [{e.kind}]: {e}", err=True)
            continue
        except (OSError, UnicodeDecodeError, JailconfError) as e:
            failed += 1
            typer.echo(f"{f}: error: {e}", err=True)
            continue

        if format != "vscode":
            typer.echo(
                f"OK: {f} ({len(document.blocks)} block(s), "
                f"{len(document.parameters)} global parameter(s))"
            )

    if failed:
        raise typer.Exit(code=1)
