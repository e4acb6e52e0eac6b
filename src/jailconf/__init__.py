"""
jailconf - parser for FreeBSD jail.conf style configuration.

Turns jail.conf text into an immutable Document of jail blocks and
parameters:

    import jailconf

    document = jailconf.parse(text)
    for block in document.blocks:
        for param in block.parameters:
            print(block.name, param.key, param.operator, param.values)
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ConfigError, JailconfError, ParseError, ParseErrorKind
from .core.ir import Comment, CommentStyle, Document, JailBlock, Parameter, ParamOperator
from .core.options import ParserOptions, load_options
from .core.parser import parse, parse_file, parse_files

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse",
    "parse_file",
    "parse_files",
    "Document",
    "JailBlock",
    "Parameter",
    "ParamOperator",
    "Comment",
    "CommentStyle",
    "ParserOptions",
    "load_options",
    "JailconfError",
    "ParseError",
    "ParseErrorKind",
    "ConfigError",
]
