"""Core jailconf functionality: lexer, parser, IR, errors and parser options."""

from . import ir
from .errors import (
    ConfigError,
    ErrorContext,
    JailconfError,
    ParseError,
    ParseErrorKind,
)
from .options import ParserOptions, load_options, resolve_options
from .parser import parse, parse_file, parse_files

__all__ = [
    "ir",
    "JailconfError",
    "ParseError",
    "ParseErrorKind",
    "ConfigError",
    "ErrorContext",
    "ParserOptions",
    "load_options",
    "resolve_options",
    "parse",
    "parse_file",
    "parse_files",
]
