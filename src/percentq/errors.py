from __future__ import annotations

"""Error hierarchy for template rendering.

Every failure is terminal for the render call that raised it. Each error
records the offending snippet and the 0-based character offset where it
starts so that template authors can locate the defect.
"""

from pathlib import Path
from typing import Optional

from percentq.parsing.source import SourceLocation

_SNIPPET_MAX = 40


def _clip(snippet: str) -> str:
    if len(snippet) <= _SNIPPET_MAX:
        return snippet
    return snippet[:_SNIPPET_MAX - 3] + "..."


class TemplateError(ValueError):
    """Base class for all template parsing and rendering failures."""

    def __init__(self, snippet: str, offset: int, message: Optional[str] = None) -> None:
        self.snippet = snippet
        self.offset = offset
        self.message = message
        super().__init__(self._render_message())

    @property
    def kind(self) -> str:
        return type(self).__name__

    def _render_message(self) -> str:
        text = f"{self.kind} at offset {self.offset}: {_clip(self.snippet)!r}"
        if self.message:
            text += f" ({self.message})"
        return text

    def locate(self, text: str, path: Optional[Path] = None) -> SourceLocation:
        """Return the line/column of this error within *text*."""
        return SourceLocation.from_offset(text, self.offset, path)


class UnterminatedInterpolation(TemplateError):
    """A ``#{`` marker without a balancing ``}``."""


class InvalidEscapeSequence(TemplateError):
    """A backslash form the escape grammar does not recognize."""


class MalformedEscape(TemplateError):
    """A lone backslash at the end of the template."""


class InterpolationEvaluationError(TemplateError):
    """The evaluator failed on an interpolation.

    The evaluator's exception is chained as ``__cause__``.
    """

    def __init__(self, expression: str, offset: int, cause: BaseException) -> None:
        self.expression = expression
        self.cause = cause
        super().__init__(expression, offset, f"{type(cause).__name__}: {cause}")
