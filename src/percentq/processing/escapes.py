r"""
escapes – Backslash escape decoding following Python's string-literal grammar.

Recognized forms (the backslash is always the first character):

  • simple      \\ \' \" \a \b \f \n \r \t \v
  • octal       \o \oo \ooo            (value ≤ 0o377)
  • hex         \xhh \uXXXX \UXXXXXXXX  (code point ≤ U+10FFFF)
  • named       \N{LATIN SMALL LETTER A}
  • mnemonics   \NUL \SOH … \US \SP \DEL (ASCII control names)
  • template    \#  and  \<whitespace>

Anything else raises InvalidEscapeSequence; a backslash with nothing after
it raises MalformedEscape.
"""

import re
import unicodedata
from typing import Dict, Optional

from percentq.constants import BACKSLASH, INTERP_OPEN, INTERP_SIGIL
from percentq.core.models import EscapeToken
from percentq.errors import InvalidEscapeSequence, MalformedEscape

_SIMPLE: Dict[str, str] = {
    '\\': '\\',
    "'": "'",
    '"': '"',
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
}

_MNEMONICS: Dict[str, str] = {
    name: chr(code)
    for code, name in enumerate(
        'NUL SOH STX ETX EOT ENQ ACK BEL BS HT LF VT FF CR SO SI '
        'DLE DC1 DC2 DC3 DC4 NAK SYN ETB CAN EM SUB ESC FS GS RS US'.split()
    )
}
_MNEMONICS['SP'] = ' '
_MNEMONICS['DEL'] = '\x7f'
# Longest first so that \SOH wins over \SO.
_MNEMONIC_ORDER = sorted(_MNEMONICS, key=len, reverse=True)

_OCTAL_RX = re.compile(r'[0-7]{1,3}')
_HEX_WIDTH = {'x': 2, 'u': 4, 'U': 8}
_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
_NAMED_RX = re.compile(r'N\{([^}]*)\}')

_ENCODE: Dict[str, str] = {
    '\\': '\\\\',
    '\a': '\\a',
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\v': '\\v',
}


class EscapeDecoder:
    """Recognize and decode one escape sequence at a time."""

    def match(self, text: str, pos: int) -> EscapeToken:
        """Decode the escape starting at ``text[pos]`` (which must be a backslash).

        Raises:
            MalformedEscape: the backslash is the last character.
            InvalidEscapeSequence: the form is not part of the grammar.
        """
        body = pos + 1
        if body >= len(text):
            raise MalformedEscape(BACKSLASH, pos, 'trailing backslash')

        ch = text[body]
        if ch in _SIMPLE:
            return EscapeToken(text[pos:body + 1], _SIMPLE[ch], pos)
        if ch == INTERP_SIGIL or ch.isspace():
            return EscapeToken(text[pos:body + 1], ch, pos)

        m = _OCTAL_RX.match(text, body)
        if m:
            code = int(m.group(0), 8)
            if code > 0o377:
                raise InvalidEscapeSequence(text[pos:m.end()], pos, 'octal value out of range')
            return EscapeToken(text[pos:m.end()], chr(code), pos)

        tok = self._match_hex(text, pos)
        if tok is not None:
            return tok

        if text.startswith('N{', body):
            m = _NAMED_RX.match(text, body)
            if not m:
                raise InvalidEscapeSequence(text[pos:], pos, 'unterminated \\N{...}')
            try:
                value = unicodedata.lookup(m.group(1))
            except KeyError:
                raise InvalidEscapeSequence(text[pos:m.end()], pos, 'unknown character name') from None
            return EscapeToken(text[pos:m.end()], value, pos)

        for name in _MNEMONIC_ORDER:
            if text.startswith(name, body):
                return EscapeToken(text[pos:body + len(name)], _MNEMONICS[name], pos)

        raise InvalidEscapeSequence(text[pos:body + 1], pos)

    @staticmethod
    def _match_hex(text: str, pos: int) -> Optional[EscapeToken]:
        body = pos + 1
        width = _HEX_WIDTH.get(text[body])
        if width is None:
            return None
        digits = text[body + 1:body + 1 + width]
        if len(digits) == width and all(d in _HEX_DIGITS for d in digits):
            code = int(digits, 16)
            if code > 0x10FFFF:
                raise InvalidEscapeSequence(text[pos:body + 1 + width], pos, 'code point out of range')
            return EscapeToken(text[pos:body + 1 + width], chr(code), pos)
        if text[body] == 'U' and text.startswith('US', body):
            # \US is the unit-separator mnemonic, not a truncated \U escape.
            return None
        raise InvalidEscapeSequence(text[pos:body + 1 + len(digits)], pos,
                                    f'expected {width} hex digits')

    def decode(self, text: str) -> str:
        """Decode every escape in *text*; all other characters pass through."""
        out: list[str] = []
        i = 0
        n = len(text)
        while i < n:
            j = text.find(BACKSLASH, i)
            if j == -1:
                out.append(text[i:])
                break
            out.append(text[i:j])
            tok = self.match(text, j)
            out.append(tok.value)
            i = tok.end
        return ''.join(out)

    @staticmethod
    def encode(text: str) -> str:
        """Inverse of :meth:`decode`: produce the canonical escaped form."""
        out: list[str] = []
        for i, ch in enumerate(text):
            if ch in _ENCODE:
                out.append(_ENCODE[ch])
            elif ch == INTERP_SIGIL and text.startswith(INTERP_OPEN, i):
                out.append(BACKSLASH + ch)
            elif ord(ch) < 0x20 or ord(ch) == 0x7f:
                out.append(f'\\x{ord(ch):02x}')
            else:
                out.append(ch)
        return ''.join(out)


_DEFAULT = EscapeDecoder()


def decode_escapes(text: str) -> str:
    """Decode all backslash escapes in *text* with the default decoder."""
    return _DEFAULT.decode(text)


def encode_escapes(text: str) -> str:
    """Escape *text* so that :func:`decode_escapes` returns it unchanged."""
    return _DEFAULT.encode(text)
