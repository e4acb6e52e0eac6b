"""
Document types for jail.conf IR.

A parsed buffer is a ``Document``: an ordered list of ``JailBlock``s, each
holding an ordered list of ``Parameter``s. Parameters found outside any block
(global defaults) and comments are kept alongside the blocks.

Example source:
    exec.clean;

    * {
        path = "/usr/jails/$name";
    }

    www {
        ip4.addr += "lo1|127.0.1.1/32";
        ip4.addr += "em0|192.168.5.1/32";
        persist;
    }
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

from .location import SourceLocation

DEFAULT_BLOCK_NAME = "*"


class ParamOperator(StrEnum):
    """How a parameter statement assigns its value."""

    SET = "set"  # key = value;
    APPEND = "append"  # key += value;
    PRESENCE = "presence"  # key;

    @property
    def symbol(self) -> str:
        """Operator as written in the source ("" for presence)."""
        return _OPERATOR_SYMBOLS[self]


_OPERATOR_SYMBOLS = {
    ParamOperator.SET: "=",
    ParamOperator.APPEND: "+=",
    ParamOperator.PRESENCE: "",
}


class CommentStyle(StrEnum):
    """Comment delimiters recognized by the lexer."""

    C = "c"  # /* ... */
    CPP = "cpp"  # // ...
    SHELL = "shell"  # # ...


class Comment(BaseModel):
    """
    A comment found in the source.

    Attributes:
        style: Which delimiter introduced the comment
        text: Comment body without delimiters, whitespace preserved
        location: Where the comment starts
    """

    style: CommentStyle
    text: str
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)


class Parameter(BaseModel):
    """
    One ``key <op> <value>? ;`` statement.

    ``SET`` and ``APPEND`` carry exactly one value; ``PRESENCE`` carries none.
    Repeated ``APPEND`` statements for the same key stay separate entries.

    Attributes:
        key: Dotted parameter name (e.g. ``ip4.addr``)
        operator: Assignment kind
        values: Values contributed by this statement
        location: Where the key starts
    """

    key: str
    operator: ParamOperator
    values: tuple[str, ...] = ()
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_value_count(self) -> Parameter:
        expected = 0 if self.operator == ParamOperator.PRESENCE else 1
        if len(self.values) != expected:
            raise ValueError(
                f"{self.operator.value} parameter '{self.key}' takes {expected} "
                f"value(s), got {len(self.values)}"
            )
        return self

    @property
    def value(self) -> str | None:
        """The single value, or None for a presence flag."""
        return self.values[0] if self.values else None

    @property
    def is_flag(self) -> bool:
        return self.operator == ParamOperator.PRESENCE


class JailBlock(BaseModel):
    """
    One ``name { ... }`` unit.

    Attributes:
        name: Jail name, or ``*`` for the default block
        parameters: Statements in source order
        location: Where the block name starts
    """

    name: str
    parameters: tuple[Parameter, ...] = ()
    location: SourceLocation | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_default(self) -> bool:
        return self.name == DEFAULT_BLOCK_NAME

    def get(self, key: str) -> list[Parameter]:
        """All parameters with ``key``, in source order."""
        return [p for p in self.parameters if p.key == key]

    def keys(self) -> list[str]:
        """Distinct parameter keys in order of first occurrence."""
        return list(dict.fromkeys(p.key for p in self.parameters))


class Document(BaseModel):
    """
    Parse result for one input buffer.

    Blocks are kept in source order; blocks sharing a name are neither merged
    nor deduplicated.

    Attributes:
        blocks: Jail blocks in source order
        parameters: Global parameters declared outside any block
        comments: Comments in source order (empty if not retained)
    """

    blocks: tuple[JailBlock, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    comments: tuple[Comment, ...] = ()

    model_config = ConfigDict(frozen=True)

    def get_blocks(self, name: str) -> list[JailBlock]:
        """All blocks called ``name``, in source order."""
        return [b for b in self.blocks if b.name == name]

    def block_names(self) -> list[str]:
        """Distinct block names in order of first occurrence."""
        return list(dict.fromkeys(b.name for b in self.blocks))

    def default_blocks(self) -> list[JailBlock]:
        return self.get_blocks(DEFAULT_BLOCK_NAME)
