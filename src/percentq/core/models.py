from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from percentq.constants import BRACE_CLOSE, INTERP_OPEN


@dataclass(frozen=True)
class LiteralToken:
    """Verbatim template text."""
    text: str
    start: int

    @property
    def raw(self) -> str:
        return self.text

    @property
    def end(self) -> int:
        return self.start + len(self.raw)


@dataclass(frozen=True)
class EscapeToken:
    """A backslash sequence (``raw``) and the character(s) it denotes (``value``)."""
    raw: str
    value: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.raw)


@dataclass(frozen=True)
class InterpolationToken:
    """A ``#{...}`` span; ``expression`` is the verbatim inner text."""
    expression: str
    start: int

    @property
    def raw(self) -> str:
        return f"{INTERP_OPEN}{self.expression}{BRACE_CLOSE}"

    @property
    def end(self) -> int:
        return self.start + len(self.raw)


Token = Union[LiteralToken, EscapeToken, InterpolationToken]
Word = Tuple[Token, ...]


class RenderMode(Enum):
    """The four transforms, on the splitting and expansion axes."""

    RAW = 'q'
    INTERPOLATED = 'qq'
    RAW_WORDS = 'w'
    INTERPOLATED_WORDS = 'ww'

    @property
    def splits(self) -> bool:
        return self in (RenderMode.RAW_WORDS, RenderMode.INTERPOLATED_WORDS)

    @property
    def expands(self) -> bool:
        return self in (RenderMode.INTERPOLATED, RenderMode.INTERPOLATED_WORDS)

    @classmethod
    def from_name(cls, name: str) -> "RenderMode":
        """Resolve a percent-letter alias ('qq') or member name ('INTERPOLATED'), ignoring case."""
        key = (name or '').strip().lower()
        for mode in cls:
            if key in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"unknown render mode {name!r}")
