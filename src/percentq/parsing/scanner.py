from __future__ import annotations

"""
TemplateScanner – split template text into literal, escape and
interpolation tokens.

What is recognized depends on the render mode:

  • raw string            nothing; the template is one literal token.
  • raw words             only \\\\ and \\<whitespace>; other backslashes are literal.
  • interpolated modes    every escape of the decoder grammar, \\# and #{...}.

The token stream has no gaps or overlaps: joining the ``raw`` text of all
tokens gives back the template.
"""

from typing import List, Optional

from percentq.constants import BACKSLASH, INTERP_OPEN
from percentq.core.interfaces.logging import LoggerLikeProtocol
from percentq.core.models import EscapeToken, LiteralToken, RenderMode, Token
from percentq.logging.helpers import get_logger, trace
from percentq.parsing.interpolation import InterpolationExtractor
from percentq.processing.escapes import EscapeDecoder


class TemplateScanner:
    def __init__(
        self,
        *,
        decoder: Optional[EscapeDecoder] = None,
        extractor: Optional[InterpolationExtractor] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._decoder = decoder or EscapeDecoder()
        self._extractor = extractor or InterpolationExtractor()
        self._log = logger or get_logger('parsing.scanner')

    def scan(self, text: str, mode: RenderMode) -> List[Token]:
        """Return the ordered token sequence of *text* under *mode*."""
        if mode is RenderMode.RAW:
            tokens: List[Token] = [LiteralToken(text, 0)] if text else []
        elif mode.expands:
            tokens = self._scan_expanding(text)
        else:
            tokens = self._scan_raw_words(text)
        trace(self._log, 'scanned template', mode=mode.value, tokens=len(tokens))
        return tokens

    def _scan_expanding(self, text: str) -> List[Token]:
        out: List[Token] = []
        lit_start = 0
        i = 0
        n = len(text)

        def _flush(end: int) -> None:
            if end > lit_start:
                out.append(LiteralToken(text[lit_start:end], lit_start))

        while i < n:
            ch = text[i]
            if ch == BACKSLASH:
                _flush(i)
                tok: Token = self._decoder.match(text, i)
            elif text.startswith(INTERP_OPEN, i):
                _flush(i)
                tok = self._extractor.extract(text, i)
            else:
                i += 1
                continue
            out.append(tok)
            i = lit_start = tok.end

        _flush(n)
        return out

    @staticmethod
    def _scan_raw_words(text: str) -> List[Token]:
        out: List[Token] = []
        lit_start = 0
        i = 0
        n = len(text)
        while i < n:
            if text[i] == BACKSLASH and i + 1 < n:
                nxt = text[i + 1]
                if nxt == BACKSLASH or nxt.isspace():
                    if i > lit_start:
                        out.append(LiteralToken(text[lit_start:i], lit_start))
                    out.append(EscapeToken(text[i:i + 2], nxt, i))
                    i = lit_start = i + 2
                    continue
            i += 1
        if n > lit_start:
            out.append(LiteralToken(text[lit_start:n], lit_start))
        return out


_DEFAULT = TemplateScanner()


def tokenize(text: str, mode: RenderMode = RenderMode.INTERPOLATED) -> List[Token]:
    """Tokenize *text* with the default scanner."""
    return _DEFAULT.scan(text, mode)
