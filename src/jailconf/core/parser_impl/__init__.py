"""
jail.conf Parser Package.

The parser is built using mixins to separate parsing logic by construct type.

The main exports are:
- Parser: The complete parser class
- parse_conf: Convenience function to parse jail.conf text

Usage:
    from jailconf.core.parser_impl import parse_conf

    document = parse_conf(text, Path("/etc/jail.conf"))
"""

import logging
from pathlib import Path

from .. import ir
from ..errors import ParseErrorKind
from ..lexer import Lexer, TokenType
from ..options import ParserOptions
from .base import BaseParser, describe
from .block import BlockParserMixin
from .parameter import ParameterParserMixin

logger = logging.getLogger(__name__)


class Parser(
    BaseParser,
    ParameterParserMixin,
    BlockParserMixin,
):
    """
    Complete jail.conf parser.

    - ParameterParserMixin: append, set and presence statements
    - BlockParserMixin: named and default (``*``) jail blocks

    Grammar:
        document := (block | parameter)*
    """

    def parse(self, comments: list[ir.Comment] | None = None) -> ir.Document:
        """
        Parse the whole token stream.

        Args:
            comments: Comments collected by the lexer, kept if enabled

        Returns:
            Document with all blocks and global parameters
        """
        blocks: list[ir.JailBlock] = []
        parameters: list[ir.Parameter] = []

        while not self.match(TokenType.EOF):
            token = self.current_token()

            if token.type == TokenType.RBRACE:
                raise self.error_at(
                    token,
                    "Unmatched '}' with no open block",
                    ParseErrorKind.UNBALANCED_BLOCK,
                )

            if token.type == TokenType.LBRACE:
                raise self.error_at(
                    token,
                    "Block is missing a jail name",
                    ParseErrorKind.INVALID_BLOCK_NAME,
                )

            if (
                token.type in (TokenType.WORD, TokenType.STRING)
                and self.peek_token().type == TokenType.LBRACE
            ):
                blocks.append(self.parse_block())

            elif token.type == TokenType.WORD:
                if not self.options.global_parameters:
                    raise self.error_at(
                        token,
                        f"Parameter {token.value!r} outside a jail block "
                        "(global parameters are disabled)",
                        ParseErrorKind.UNEXPECTED_TOKEN,
                    )
                parameters.append(self.parse_parameter())

            else:
                raise self.error_at(
                    token,
                    f"Unexpected {describe(token)}, expected a jail block or parameter",
                    ParseErrorKind.UNEXPECTED_TOKEN,
                )

        kept_comments = (comments or []) if self.options.keep_comments else []
        logger.debug(
            f"Parsed {len(blocks)} block(s), {len(parameters)} global parameter(s), "
            f"{len(kept_comments)} comment(s) from {self.file or '<string>'}"
        )

        return ir.Document(blocks=blocks, parameters=parameters, comments=kept_comments)


def parse_conf(
    text: str,
    file: Path | None = None,
    options: ParserOptions | None = None,
) -> ir.Document:
    """
    Parse jail.conf text into a Document.

    Args:
        text: Complete configuration text
        file: Source file path (for error reporting)
        options: Parser switches, defaults if omitted

    Returns:
        Parsed Document

    Raises:
        ParseError: On the first malformed construct; nothing partial is returned
    """
    lexer = Lexer(text, file)
    tokens = lexer.tokenize()

    parser = Parser(tokens, file, source=text, options=options)
    return parser.parse(lexer.comments)


__all__ = [
    "Parser",
    "parse_conf",
]
