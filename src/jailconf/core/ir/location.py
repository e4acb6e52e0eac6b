"""Source location tracking for IR nodes.

Records the file, line, column and offset where a jail.conf construct was
defined, enabling source-mapped diagnostics.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SourceLocation(BaseModel):
    """Source position where a construct was defined.

    Attributes:
        file: Path to the source file, or ``<string>`` for an in-memory buffer
        line: 1-indexed line number
        column: 1-indexed column number
        offset: 0-indexed character offset into the buffer
    """

    file: str = "<string>"
    line: int
    column: int
    offset: int = 0

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
