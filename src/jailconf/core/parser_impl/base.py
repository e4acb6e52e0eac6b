"""
Base parser class for jail.conf.

Provides common token manipulation and utility methods used by all parser mixins.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from ..errors import ParseError, ParseErrorKind, make_parse_error
from ..ir import Parameter, SourceLocation
from ..lexer import Token, TokenType
from ..options import ParserOptions


@runtime_checkable
class ParserProtocol(Protocol):
    """
    Protocol defining the interface available to parser mixins.

    This allows mypy to understand that mixins will have access to
    BaseParser methods when combined in the final Parser class.
    """

    tokens: list[Token]
    file: Path | None
    source: str
    options: ParserOptions
    pos: int

    def current_token(self) -> Token: ...
    def peek_token(self, offset: int = 1) -> Token: ...
    def advance(self) -> Token: ...
    def expect(self, token_type: TokenType, kind: ParseErrorKind = ...) -> Token: ...
    def match(self, *token_types: TokenType) -> bool: ...
    def error_at(self, token: Token, message: str, kind: ParseErrorKind) -> ParseError: ...
    def location_of(self, token: Token) -> SourceLocation: ...

    # Methods from other mixins that may be called cross-mixin
    def parse_parameter(self) -> Parameter: ...


def describe(token: Token) -> str:
    """Human-readable description of a token for error messages."""
    if token.type == TokenType.EOF:
        return "end of input"
    if token.type in (TokenType.WORD, TokenType.VALUE):
        return repr(token.value)
    if token.type == TokenType.STRING:
        return f'"{token.value}"'
    return f"'{token.type.value}'"


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    This class provides the foundation for recursive descent parsing,
    including token navigation, matching, and error generation.
    """

    def __init__(
        self,
        tokens: list[Token],
        file: Path | None = None,
        source: str = "",
        options: ParserOptions | None = None,
    ):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from lexer
            file: Source file path (for error reporting)
            source: Source text (for error snippets)
            options: Parser switches, defaults if omitted
        """
        self.tokens = tokens
        self.file = file
        self.source = source
        self.options = options or ParserOptions()
        self.pos = 0

    def current_token(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[self.pos]

    def peek_token(self, offset: int = 1) -> Token:
        """Peek ahead at token."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types

    def expect(
        self,
        token_type: TokenType,
        kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_TOKEN,
    ) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        token = self.current_token()
        if token.type != token_type:
            raise self.error_at(
                token,
                f"Expected '{token_type.value}', got {describe(token)}",
                kind,
            )
        return self.advance()

    def error_at(self, token: Token, message: str, kind: ParseErrorKind) -> ParseError:
        """Build a ParseError pointing at ``token``."""
        return make_parse_error(
            message,
            kind,
            self.file,
            token.line,
            token.column,
            token.offset,
            source=self.source,
        )

    def location_of(self, token: Token) -> SourceLocation:
        return SourceLocation(
            file=str(self.file) if self.file else "<string>",
            line=token.line,
            column=token.column,
            offset=token.offset,
        )
