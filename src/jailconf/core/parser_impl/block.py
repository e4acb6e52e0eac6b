"""
Jail block parsing for jail.conf.

Syntax:

    www {
        host.hostname = "www.example.org";
        ip4.addr += "lo1|127.0.1.1/32";
        persist;
    }

    * {
        exec.clean;
    }

Blocks do not nest; a block body holds parameters only.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from .. import ir
from ..errors import ParseErrorKind
from ..lexer import TokenType
from .base import describe

BLOCK_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")


def is_valid_block_name(name: str) -> bool:
    return name == ir.DEFAULT_BLOCK_NAME or BLOCK_NAME_RE.fullmatch(name) is not None


class BlockParserMixin:
    """
    Parser mixin for jail blocks.

    Grammar:
        block      := block_name '{' parameter* '}'
        block_name := identifier | '*'
    """

    if TYPE_CHECKING:
        advance: Any
        match: Any
        current_token: Any
        peek_token: Any
        expect: Any
        error_at: Any
        location_of: Any
        parse_parameter: Any

    def parse_block(self) -> ir.JailBlock:
        """Parse a block header and its body up to the closing brace."""
        name_token = self.current_token()
        if name_token.type == TokenType.STRING:
            raise self.error_at(
                name_token,
                f"Invalid jail name {describe(name_token)}: jail names are not quoted",
                ParseErrorKind.INVALID_BLOCK_NAME,
            )
        if name_token.type != TokenType.WORD or not is_valid_block_name(name_token.value):
            raise self.error_at(
                name_token,
                f"Invalid jail name {describe(name_token)}: expected letters, digits, "
                "'_', '-' or '*'",
                ParseErrorKind.INVALID_BLOCK_NAME,
            )
        self.advance()
        self.expect(TokenType.LBRACE)

        parameters: list[ir.Parameter] = []
        while not self.match(TokenType.RBRACE):
            token = self.current_token()

            if token.type == TokenType.EOF:
                raise self.error_at(
                    token,
                    f"Block {name_token.value!r} opened on line {name_token.line} "
                    "is missing its closing '}'",
                    ParseErrorKind.UNBALANCED_BLOCK,
                )

            if token.type == TokenType.WORD and self.peek_token().type == TokenType.LBRACE:
                raise self.error_at(
                    token,
                    f"Nested block {token.value!r} inside {name_token.value!r} is not allowed",
                    ParseErrorKind.UNEXPECTED_TOKEN,
                )

            parameters.append(self.parse_parameter())

        self.advance()  # closing brace

        return ir.JailBlock(
            name=name_token.value,
            parameters=parameters,
            location=self.location_of(name_token),
        )
