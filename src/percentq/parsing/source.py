from __future__ import annotations
"""Template source locations.

Errors carry a plain character offset. This module turns such an offset
into a (line, col) pair for human-readable diagnostics, optionally tagged
with the file the template was read from.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SourceLocation:
    """Represents a position inside a template.

    Attributes:
        path: Path to the template file if known.
        line: 1-based line number.
        col:  1-based column number.
    """
    path: Optional[Path] = None
    line: Optional[int] = None
    col: Optional[int] = None

    @classmethod
    def from_offset(cls, text: str, offset: int, path: Optional[Path] = None) -> "SourceLocation":
        """Compute the line/column of *offset* (0-based) within *text*."""
        offset = max(0, min(offset, len(text)))
        line = text.count("\n", 0, offset) + 1
        col = offset - (text.rfind("\n", 0, offset) + 1) + 1
        return cls(path=path, line=line, col=col)

    def format(self) -> str:
        """Return a human-readable source label."""
        parts: list[str] = []
        if self.path:
            parts.append(str(self.path))
        if self.line is not None:
            parts.append(f"line {self.line}")
        if self.col is not None:
            parts.append(f"col {self.col}")
        return ":".join(parts) if parts else "<template>"
