from __future__ import annotations

"""
InterpolationExtractor – locate the extent of a ``#{ ... }`` span.

The inner text is free-form code, so the first ``}`` is not necessarily
the closing delimiter: ``#{ f({1,2}) }`` must be extracted whole. Braces
are counted instead; the span ends when the depth returns to zero.
"""

from percentq.constants import BRACE_CLOSE, BRACE_OPEN, INTERP_OPEN
from percentq.core.models import InterpolationToken
from percentq.errors import UnterminatedInterpolation


class InterpolationExtractor:
    @staticmethod
    def extract(text: str, pos: int) -> InterpolationToken:
        """Extract the interpolation whose ``#{`` marker starts at *pos*.

        Args:
            text: Full template text.
            pos: Offset of the ``#`` of the opening marker.

        Returns:
            InterpolationToken holding the verbatim inner expression text.

        Raises:
            UnterminatedInterpolation: the input ends before the braces balance.
        """
        if not text.startswith(INTERP_OPEN, pos):
            raise ValueError(f"no interpolation marker at offset {pos}")

        body = pos + len(INTERP_OPEN)
        depth = 1
        i = body
        n = len(text)
        while i < n:
            ch = text[i]
            if ch == BRACE_OPEN:
                depth += 1
            elif ch == BRACE_CLOSE:
                depth -= 1
                if depth == 0:
                    return InterpolationToken(text[body:i], pos)
            i += 1

        raise UnterminatedInterpolation(text[pos:], pos, 'missing closing brace')
