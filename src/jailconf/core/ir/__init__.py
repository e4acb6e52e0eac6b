"""
jailconf Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .document import (
    DEFAULT_BLOCK_NAME,
    Comment,
    CommentStyle,
    Document,
    JailBlock,
    Parameter,
    ParamOperator,
)
from .location import SourceLocation

__all__ = [
    "DEFAULT_BLOCK_NAME",
    "Comment",
    "CommentStyle",
    "Document",
    "JailBlock",
    "Parameter",
    "ParamOperator",
    "SourceLocation",
]
