"""
Parameter parsing for jail.conf.

Handles the three statement forms sharing one rule:
    ip4.addr += "lo1|127.0.1.1/32";    (append)
    host.hostname = www;               (set)
    persist;                           (presence)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ParseErrorKind
from ..lexer import TokenType
from .base import describe

KEY_SEGMENT_RE = re.compile(r"[A-Za-z0-9_]+")

VALUE_TOKENS = (TokenType.STRING, TokenType.VALUE)


def validate_key(key: str) -> str | None:
    """Return a reason why ``key`` is not a dotted key, or None if it is."""
    if key.startswith("."):
        return "leading dot"
    if key.endswith("."):
        return "trailing dot"
    for segment in key.split("."):
        if not segment:
            return "empty segment"
        if not KEY_SEGMENT_RE.fullmatch(segment):
            bad = next(ch for ch in segment if not KEY_SEGMENT_RE.fullmatch(ch))
            return f"illegal character {bad!r}"
    return None


class ParameterParserMixin:
    """
    Parser mixin for parameter statements.

    Grammar:
        parameter := dotted_key ( '+=' value | '=' value )? ';'
    """

    if TYPE_CHECKING:
        advance: Any
        match: Any
        current_token: Any
        error_at: Any
        location_of: Any

    def parse_parameter(self) -> ir.Parameter:
        """Parse one parameter statement, including its terminating ``;``."""
        key_token = self.current_token()
        if key_token.type != TokenType.WORD:
            raise self.error_at(
                key_token,
                f"Expected parameter name, got {describe(key_token)}",
                ParseErrorKind.UNEXPECTED_TOKEN,
            )

        reason = validate_key(key_token.value)
        if reason:
            raise self.error_at(
                key_token,
                f"Invalid parameter name {key_token.value!r}: {reason}",
                ParseErrorKind.INVALID_KEY,
            )
        self.advance()

        # Append before set before presence
        if self.match(TokenType.APPEND):
            self.advance()
            operator = ir.ParamOperator.APPEND
            values: tuple[str, ...] = (self._parse_value(key_token.value),)
        elif self.match(TokenType.EQUALS):
            self.advance()
            operator = ir.ParamOperator.SET
            values = (self._parse_value(key_token.value),)
        else:
            operator = ir.ParamOperator.PRESENCE
            values = ()

        terminator = self.current_token()
        if terminator.type != TokenType.SEMICOLON:
            raise self.error_at(
                terminator,
                f"Missing ';' after parameter {key_token.value!r}, got {describe(terminator)}",
                ParseErrorKind.MISSING_SEMICOLON,
            )
        self.advance()

        return ir.Parameter(
            key=key_token.value,
            operator=operator,
            values=values,
            location=self.location_of(key_token),
        )

    def _parse_value(self, key: str) -> str:
        token = self.current_token()
        if token.type not in VALUE_TOKENS:
            raise self.error_at(
                token,
                f"Expected value for {key!r}, got {describe(token)}",
                ParseErrorKind.UNEXPECTED_TOKEN,
            )
        self.advance()
        return token.value
