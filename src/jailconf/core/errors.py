"""
Error types for jail.conf parsing and configuration loading.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Optional


class ParseErrorKind(StrEnum):
    """Semantic category of a parse failure."""

    UNTERMINATED_STRING = "UnterminatedString"
    UNTERMINATED_COMMENT = "UnterminatedComment"
    UNBALANCED_BLOCK = "UnbalancedBlock"
    MISSING_SEMICOLON = "MissingSemicolon"
    INVALID_KEY = "InvalidKey"
    INVALID_BLOCK_NAME = "InvalidBlockName"
    UNEXPECTED_TOKEN = "UnexpectedToken"


class JailconfError(Exception):
    """Base exception for all jailconf errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(JailconfError):
    """
    Raised when jail.conf text cannot be parsed.

    Examples:
    - Quoted value without a closing quote
    - Block without a closing brace
    - Parameter without a terminating semicolon
    - Malformed dotted key or block name
    """

    def __init__(
        self,
        message: str,
        context: Optional["ErrorContext"] = None,
        kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_TOKEN,
    ):
        self.kind = kind
        super().__init__(message, context)

    @property
    def line(self) -> int | None:
        return self.context.line if self.context else None

    @property
    def column(self) -> int | None:
        return self.context.column if self.context else None

    @property
    def offset(self) -> int | None:
        return self.context.offset if self.context else None

    @property
    def byte_offset(self) -> int | None:
        return self.context.byte_offset if self.context else None


class ConfigError(JailconfError):
    """
    Raised when a jailconf options file is invalid.

    Examples:
    - Malformed TOML
    - Unknown option name
    - Option value of the wrong type
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file, or None for an in-memory buffer
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset into the buffer (0-indexed)
        byte_offset: Offset into the UTF-8 encoded buffer (0-indexed)
        snippet: Optional source lines surrounding the error location
    """

    file: Path | None
    line: int
    column: int
    offset: int = 0
    snippet: str | None = None
    byte_offset: int = 0

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "jail.conf:10:5"
        """
        location = f"{self.file or '<string>'}:{self.line}:{self.column}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippet starts at most 2 lines before the error line
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def extract_snippet(text: str, line: int, context_lines: int = 2) -> str:
    """Return the source lines around ``line`` (1-indexed)."""
    lines = text.split("\n")
    start = max(1, line - context_lines)
    end = min(len(lines), line + context_lines)
    return "\n".join(lines[start - 1 : end])


def make_parse_error(
    message: str,
    kind: ParseErrorKind,
    file: Path | None,
    line: int,
    column: int,
    offset: int = 0,
    source: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        kind: Semantic error category
        file: Source file path, or None for an in-memory buffer
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset (0-indexed)
        source: Full source text, used to attach a snippet and
            compute the byte offset

    Returns:
        ParseError with context attached
    """
    snippet = None
    byte_offset = offset
    if source is not None:
        snippet = extract_snippet(source, line)
        byte_offset = len(source[:offset].encode("utf-8", "surrogatepass"))
    context = ErrorContext(
        file=file,
        line=line,
        column=column,
        offset=offset,
        snippet=snippet,
        byte_offset=byte_offset,
    )
    return ParseError(message, context, kind=kind)


def make_config_error(message: str, file: Path | None = None) -> ConfigError:
    """
    Helper to create a ConfigError, optionally pointing at the options file.

    Args:
        message: Error description
        file: Optional options file path

    Returns:
        ConfigError with context if a file is given
    """
    if file:
        return ConfigError(message, ErrorContext(file=file, line=1, column=1))
    return ConfigError(message)
