"""
words – Escape-aware whitespace word splitting over a token stream.

Only whitespace inside literal tokens separates words. Escape tokens
(including an escaped space) and interpolation tokens are opaque and always
belong to the word currently being built.
"""

import re
from typing import Iterable, List

from percentq.core.models import LiteralToken, Token, Word

_WS_RX = re.compile(r'\s+')


class WordSplitter:
    def split(self, tokens: Iterable[Token]) -> List[Word]:
        """Partition *tokens* into words on runs of unescaped whitespace.

        Literal tokens are cut at whitespace runs; each resulting piece keeps
        its original offset. Leading and trailing runs never produce an
        empty word.
        """
        words: List[Word] = []
        current: List[Token] = []

        def _close() -> None:
            if current:
                words.append(tuple(current))
                current.clear()

        for tok in tokens:
            if not isinstance(tok, LiteralToken):
                current.append(tok)
                continue
            pos = 0
            for m in _WS_RX.finditer(tok.text):
                if m.start() > pos:
                    current.append(LiteralToken(tok.text[pos:m.start()], tok.start + pos))
                _close()
                pos = m.end()
            if pos < len(tok.text):
                current.append(LiteralToken(tok.text[pos:], tok.start + pos))

        _close()
        return words
