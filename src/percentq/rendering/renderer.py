"""
renderer – TemplateRenderer, the orchestrator behind the four transforms.

  mode                      split   escapes            interpolation
  q   RAW                   no      no                 no
  qq  INTERPOLATED          no      yes                yes
  w   RAW_WORDS             yes     \\\\ and \\<ws> only   no
  ww  INTERPOLATED_WORDS    yes     yes                yes

Rendering happens in two phases. The whole template is tokenized first, so
syntax errors surface before the evaluator is ever called. Tokens are then
resolved left to right; the first evaluator failure aborts the render.
"""

from typing import Iterable, List, Optional, Union

from percentq.core.interfaces.evaluator import EvaluatorProtocol
from percentq.core.interfaces.logging import LoggerLikeProtocol
from percentq.core.models import (
    EscapeToken,
    InterpolationToken,
    LiteralToken,
    RenderMode,
    Token,
)
from percentq.errors import InterpolationEvaluationError
from percentq.logging.helpers import get_logger, trace
from percentq.parsing.scanner import TemplateScanner
from percentq.processing.words import WordSplitter


class TemplateRenderer:
    """Render templates in any of the four modes.

    The evaluator is only required for templates that actually contain an
    interpolation in an expanding mode.
    """

    def __init__(
        self,
        evaluator: Optional[EvaluatorProtocol] = None,
        *,
        scanner: Optional[TemplateScanner] = None,
        splitter: Optional[WordSplitter] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._evaluator = evaluator
        self._scanner = scanner or TemplateScanner()
        self._splitter = splitter or WordSplitter()
        self._log = logger or get_logger('render')

    def render(self, text: str, mode: RenderMode) -> Union[str, List[str]]:
        """Render *text* under *mode*: a str, or a list of words when splitting."""
        tokens = self._scanner.scan(text, mode)
        if mode.expands and self._evaluator is None:
            if any(isinstance(t, InterpolationToken) for t in tokens):
                raise ValueError('template contains interpolations but no evaluator was given')

        if not mode.splits:
            return self._resolve(tokens)

        words = self._splitter.split(tokens)
        trace(self._log, 'split template', words=len(words))
        # An interpolation-only word whose value is "" yields no word.
        resolved = [self._resolve(word) for word in words]
        return [word for word in resolved if word]

    def render_raw(self, text: str) -> str:
        return self.render(text, RenderMode.RAW)  # type: ignore[return-value]

    def render_interpolated(self, text: str) -> str:
        return self.render(text, RenderMode.INTERPOLATED)  # type: ignore[return-value]

    def render_raw_words(self, text: str) -> List[str]:
        return self.render(text, RenderMode.RAW_WORDS)  # type: ignore[return-value]

    def render_interpolated_words(self, text: str) -> List[str]:
        return self.render(text, RenderMode.INTERPOLATED_WORDS)  # type: ignore[return-value]

    def _resolve(self, tokens: Iterable[Token]) -> str:
        out: List[str] = []
        for tok in tokens:
            if isinstance(tok, LiteralToken):
                out.append(tok.text)
            elif isinstance(tok, EscapeToken):
                out.append(tok.value)
            else:
                out.append(self._evaluate(tok))
        return ''.join(out)

    def _evaluate(self, tok: InterpolationToken) -> str:
        try:
            value = self._evaluator(tok.expression)
        except Exception as exc:
            self._log.debug('evaluator failed on %r at offset %d: %s', tok.expression, tok.start, exc)
            raise InterpolationEvaluationError(tok.expression, tok.start, exc) from exc
        if not isinstance(value, str):
            err = TypeError(f'evaluator returned {type(value).__name__}, expected str')
            raise InterpolationEvaluationError(tok.expression, tok.start, err) from err
        return value


def render_raw(text: str) -> str:
    """Return *text* unchanged."""
    return TemplateRenderer().render_raw(text)


def render_interpolated(text: str, evaluator: EvaluatorProtocol) -> str:
    """Decode escapes and substitute ``#{...}`` spans via *evaluator*."""
    return TemplateRenderer(evaluator).render_interpolated(text)


def render_raw_words(text: str) -> List[str]:
    """Split *text* on unescaped whitespace; only ``\\\\`` and ``\\<ws>`` are decoded."""
    return TemplateRenderer().render_raw_words(text)


def render_interpolated_words(text: str, evaluator: EvaluatorProtocol) -> List[str]:
    """Split *text* into words with escapes and interpolations expanded."""
    return TemplateRenderer(evaluator).render_interpolated_words(text)
