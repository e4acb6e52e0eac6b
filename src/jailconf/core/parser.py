import logging
from pathlib import Path

from . import ir
from .options import ParserOptions
from .parser_impl import parse_conf

logger = logging.getLogger(__name__)


def parse(
    text: str,
    *,
    file: Path | None = None,
    options: ParserOptions | None = None,
) -> ir.Document:
    """
    Parse a complete jail.conf buffer.

    Pure with respect to its input: equal text and options give equal
    Documents, and no state is shared between calls.

    Raises:
        ParseError: If the text is malformed
    """
    return parse_conf(text, file, options)


def parse_file(path: Path, options: ParserOptions | None = None) -> ir.Document:
    """
    Read and parse one jail.conf file.

    Args:
        path: File to read (UTF-8)
        options: Parser switches, defaults if omitted

    Returns:
        Parsed Document
    """
    logger.info(f"Parsing {path}")
    text = path.read_text(encoding="utf-8")
    return parse_conf(text, path, options)


def parse_files(
    files: list[Path], options: ParserOptions | None = None
) -> list[tuple[Path, ir.Document]]:
    """
    Parse several jail.conf files.

    Stops at the first file that fails to parse.

    Args:
        files: List of files to parse
        options: Parser switches shared by all files

    Returns:
        List of (path, Document) pairs in input order
    """
    documents: list[tuple[Path, ir.Document]] = []

    for f in files:
        documents.append((f, parse_file(f, options)))

    return documents
