from __future__ import annotations

"""Public surface for percentq.core.

Token and mode models plus the protocol types, importable from one place:

    from percentq.core import RenderMode, EvaluatorProtocol, ...
"""

from percentq.core.interfaces import (
    EvaluatorProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    TemplateRendererProtocol,
)
from percentq.core.models import (
    EscapeToken,
    InterpolationToken,
    LiteralToken,
    RenderMode,
    Token,
    Word,
)

__all__ = [
    # Models
    "EscapeToken",
    "InterpolationToken",
    "LiteralToken",
    "RenderMode",
    "Token",
    "Word",
    # Protocols
    "EvaluatorProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "TemplateRendererProtocol",
]
