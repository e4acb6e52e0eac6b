"""
Lexer/Tokenizer for jail.conf.

Converts raw configuration text into a stream of tokens with source location
tracking. Comments (``#``, ``//`` and ``/* */``) are skipped like whitespace
and collected on the side.

The lexer has one bit of context: right after ``=`` or ``+=`` it reads the
next token as a value, so unquoted values may contain ``=``, ``+``, ``#`` or
``/`` without being split.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import ParseErrorKind, make_parse_error
from .ir import Comment, CommentStyle, SourceLocation


class TokenType(Enum):
    """Token types in jail.conf."""

    # Literals
    WORD = "WORD"
    STRING = "STRING"
    VALUE = "VALUE"

    # Operators
    EQUALS = "="
    APPEND = "+="

    # Delimiters
    SEMICOLON = ";"
    LBRACE = "{"
    RBRACE = "}"

    EOF = "EOF"


WHITESPACE = frozenset(" \t\r\n\f\v")

# Characters that end a WORD token
WORD_DELIMITERS = WHITESPACE | frozenset(';{}="')

# Characters that end a bare VALUE token
VALUE_DELIMITERS = WHITESPACE | frozenset(";{}")


@dataclass
class Token:
    """
    A single token in jail.conf.

    Attributes:
        type: Type of token
        value: String value of the token (unescaped for STRING)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset into the source (0-indexed)
    """

    type: TokenType
    value: str
    line: int
    column: int
    offset: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Lexer for jail.conf.

    Converts source text into a list of tokens terminated by EOF.
    """

    def __init__(self, text: str, file: Path | None = None):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            file: Source file path (for error reporting)
        """
        self.text = text
        self.file = file
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []
        self.comments: list[Comment] = []

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def location(self) -> SourceLocation:
        return SourceLocation(
            file=str(self.file) if self.file else "<string>",
            line=self.line,
            column=self.column,
            offset=self.pos,
        )

    def error(self, message: str, kind: ParseErrorKind, line: int, column: int, offset: int):
        return make_parse_error(message, kind, self.file, line, column, offset, source=self.text)

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while self.current_char() in WHITESPACE:
            self.advance()

    def at_comment(self) -> bool:
        ch = self.current_char()
        if ch == "#":
            return True
        return ch == "/" and self.peek_char() in ("/", "*")

    def read_comment(self) -> None:
        """Read a comment starting at the current position and record it."""
        location = self.location()

        if self.current_char() == "#":
            self.advance()
            style = CommentStyle.SHELL
        else:
            self.advance()
            style = CommentStyle.CPP if self.current_char() == "/" else CommentStyle.C
            self.advance()

        chars = []
        if style == CommentStyle.C:
            while not (self.current_char() == "*" and self.peek_char() == "/"):
                current = self.current_char()
                if current is None:
                    raise self.error(
                        "Unterminated comment",
                        ParseErrorKind.UNTERMINATED_COMMENT,
                        location.line,
                        location.column,
                        location.offset,
                    )
                chars.append(current)
                self.advance()
            self.advance()
            self.advance()
        else:
            while self.current_char() not in (None, "\n"):
                chars.append(self.current_char())
                self.advance()

        self.comments.append(Comment(style=style, text="".join(chars), location=location))

    def read_string(self) -> str:
        """
        Read a double-quoted string.

        ``\\"`` and ``\\\\`` are unescaped; other backslash pairs are kept as
        written. A raw newline ends the string with an error.
        """
        start_line = self.line
        start_col = self.column
        start_pos = self.pos
        self.advance()  # skip opening quote

        chars = []
        while True:
            current = self.current_char()
            if current is None or current == "\n":
                raise self.error(
                    "Unterminated string literal",
                    ParseErrorKind.UNTERMINATED_STRING,
                    start_line,
                    start_col,
                    start_pos,
                )
            if current == '"':
                break

            if current == "\\":
                escape_char = self.peek_char()
                if escape_char is None or escape_char == "\n":
                    raise self.error(
                        "Unterminated string literal",
                        ParseErrorKind.UNTERMINATED_STRING,
                        start_line,
                        start_col,
                        start_pos,
                    )
                if escape_char not in ('"', "\\"):
                    chars.append(current)
                chars.append(escape_char)
                self.advance()
                self.advance()
            else:
                chars.append(current)
                self.advance()

        self.advance()  # skip closing quote
        return "".join(chars)

    def read_word(self) -> str:
        """Read a block name or key candidate, stopping before ``+=``."""
        chars = []
        current = self.current_char()
        while current is not None and current not in WORD_DELIMITERS:
            if current == "+" and self.peek_char() == "=":
                break
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def read_bare_value(self) -> str:
        """Read an unquoted value."""
        chars = []
        current = self.current_char()
        while current is not None and current not in VALUE_DELIMITERS:
            chars.append(current)
            self.advance()
            current = self.current_char()
        return "".join(chars)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens ending with EOF

        Raises:
            ParseError: If a string or comment is unterminated
        """
        expect_value = False

        while True:
            self.skip_whitespace()

            ch = self.current_char()
            if ch is None:
                break

            token_line = self.line
            token_col = self.column
            token_pos = self.pos

            def emit(token_type: TokenType, value: str) -> None:
                self.tokens.append(Token(token_type, value, token_line, token_col, token_pos))

            # Values (only directly after = or +=)
            if expect_value:
                expect_value = False
                if ch == '"':
                    emit(TokenType.STRING, self.read_string())
                    continue
                if ch not in VALUE_DELIMITERS:
                    emit(TokenType.VALUE, self.read_bare_value())
                    continue

            # Comments
            if self.at_comment():
                self.read_comment()

            # Strings
            elif ch == '"':
                emit(TokenType.STRING, self.read_string())

            # Operators
            elif ch == "=":
                self.advance()
                emit(TokenType.EQUALS, "=")
                expect_value = True

            elif ch == "+" and self.peek_char() == "=":
                self.advance()
                self.advance()
                emit(TokenType.APPEND, "+=")
                expect_value = True

            # Delimiters
            elif ch == ";":
                self.advance()
                emit(TokenType.SEMICOLON, ";")

            elif ch == "{":
                self.advance()
                emit(TokenType.LBRACE, "{")

            elif ch == "}":
                self.advance()
                emit(TokenType.RBRACE, "}")

            # Block names and keys
            else:
                emit(TokenType.WORD, self.read_word())

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.column, self.pos))

        return self.tokens


def tokenize(text: str, file: Path | None = None) -> list[Token]:
    """
    Convenience function to tokenize jail.conf text.

    Args:
        text: Source text
        file: Source file path

    Returns:
        List of tokens
    """
    lexer = Lexer(text, file)
    return lexer.tokenize()
