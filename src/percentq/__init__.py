from __future__ import annotations

from typing import Optional

from percentq.cli import PercentQ
from percentq.core.interfaces import EvaluatorProtocol, LoggerLikeProtocol
from percentq.core.models import (
    EscapeToken,
    InterpolationToken,
    LiteralToken,
    RenderMode,
    Token,
)
from percentq.errors import (
    InterpolationEvaluationError,
    InvalidEscapeSequence,
    MalformedEscape,
    TemplateError,
    UnterminatedInterpolation,
)
from percentq.logging.helpers import get_logger
from percentq.parsing.scanner import TemplateScanner, tokenize
from percentq.processing.escapes import EscapeDecoder, decode_escapes, encode_escapes
from percentq.processing.words import WordSplitter
from percentq.rendering.evaluators import MappingEvaluator, PythonEvaluator, stringify
from percentq.rendering.renderer import (
    TemplateRenderer,
    render_interpolated,
    render_interpolated_words,
    render_raw,
    render_raw_words,
)

__version__ = '0.3.0'


def renderer_factory(
    *,
    evaluator: Optional[EvaluatorProtocol] = None,
    variables: Optional[dict] = None,
    logger: Optional[LoggerLikeProtocol] = None,
) -> TemplateRenderer:
    """Factory helper that returns a concrete TemplateRenderer.

    Falls back to a MappingEvaluator over *variables* when no evaluator is provided.
    """
    ev = evaluator or MappingEvaluator(variables or {})
    lg = logger or get_logger('render')
    return TemplateRenderer(ev, logger=lg)


__all__ = [
    'PercentQ',
    'renderer_factory',
    'render_raw',
    'render_interpolated',
    'render_raw_words',
    'render_interpolated_words',
    'decode_escapes',
    'encode_escapes',
    'tokenize',
    'TemplateRenderer',
    'TemplateScanner',
    'EscapeDecoder',
    'WordSplitter',
    'MappingEvaluator',
    'PythonEvaluator',
    'stringify',
    'EvaluatorProtocol',
    'RenderMode',
    'Token',
    'LiteralToken',
    'EscapeToken',
    'InterpolationToken',
    'TemplateError',
    'UnterminatedInterpolation',
    'InvalidEscapeSequence',
    'MalformedEscape',
    'InterpolationEvaluationError',
]
