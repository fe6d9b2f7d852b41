#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Escape decoder suite: every escape family of the literal grammar, the
error cases and the encode/decode inverse.
"""
from __future__ import annotations

import sys
import unittest
from pathlib import Path

# Dynamically ensure the src/ layout is importable
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from percentq import (  # noqa: E402
    EscapeDecoder,
    InvalidEscapeSequence,
    MalformedEscape,
    decode_escapes,
    encode_escapes,
)


class SimpleEscapeTests(unittest.TestCase):
    def test_control_letters(self) -> None:
        self.assertEqual(decode_escapes(r"a\nb\tc\rd"), "a\nb\tc\rd")
        self.assertEqual(decode_escapes(r"\a\b\f\v"), "\a\b\f\v")

    def test_backslash_and_quotes(self) -> None:
        self.assertEqual(decode_escapes(r"\\"), "\\")
        self.assertEqual(decode_escapes(r"\'\""), "'\"")

    def test_hash_and_whitespace(self) -> None:
        self.assertEqual(decode_escapes(r"\#{x}"), "#{x}")
        self.assertEqual(decode_escapes("a\\ b"), "a b")
        self.assertEqual(decode_escapes("a\\\tb"), "a\tb")

    def test_text_without_escapes_is_unchanged(self) -> None:
        self.assertEqual(decode_escapes("plain text #{x}"), "plain text #{x}")


class NumericEscapeTests(unittest.TestCase):
    def test_octal(self) -> None:
        self.assertEqual(decode_escapes(r"\101"), "A")
        self.assertEqual(decode_escapes(r"\0"), "\x00")
        # At most three octal digits are consumed.
        self.assertEqual(decode_escapes(r"\1234"), "S4")

    def test_octal_out_of_range(self) -> None:
        with self.assertRaises(InvalidEscapeSequence) as cm:
            decode_escapes(r"ab\400")
        self.assertEqual(cm.exception.snippet, r"\400")
        self.assertEqual(cm.exception.offset, 2)

    def test_hex_forms(self) -> None:
        self.assertEqual(decode_escapes(r"\x41"), "A")
        self.assertEqual(decode_escapes(r"\u00e9"), "é")
        self.assertEqual(decode_escapes(r"\U0001F600"), "\U0001F600")

    def test_truncated_hex(self) -> None:
        with self.assertRaises(InvalidEscapeSequence) as cm:
            decode_escapes(r"\x4")
        self.assertEqual(cm.exception.snippet, r"\x4")
        with self.assertRaises(InvalidEscapeSequence):
            decode_escapes(r"\u12g4")

    def test_code_point_out_of_range(self) -> None:
        with self.assertRaises(InvalidEscapeSequence):
            decode_escapes(r"\U00110000")


class NamedEscapeTests(unittest.TestCase):
    def test_unicode_name(self) -> None:
        self.assertEqual(decode_escapes(r"\N{BULLET} item"), "• item")

    def test_unknown_name(self) -> None:
        with self.assertRaises(InvalidEscapeSequence) as cm:
            decode_escapes(r"\N{NOT A REAL NAME}")
        self.assertEqual(cm.exception.snippet, r"\N{NOT A REAL NAME}")

    def test_unterminated_name(self) -> None:
        with self.assertRaises(InvalidEscapeSequence):
            decode_escapes(r"\N{BULLET")

    def test_ascii_mnemonics(self) -> None:
        self.assertEqual(decode_escapes(r"\NUL"), "\x00")
        self.assertEqual(decode_escapes(r"\SOH"), "\x01")
        self.assertEqual(decode_escapes(r"\SOx"), "\x0ex")
        self.assertEqual(decode_escapes(r"\ESC[0m"), "\x1b[0m")
        self.assertEqual(decode_escapes(r"\US"), "\x1f")
        self.assertEqual(decode_escapes(r"\SP"), " ")
        self.assertEqual(decode_escapes(r"\DEL"), "\x7f")


class EscapeErrorTests(unittest.TestCase):
    def test_unknown_escape(self) -> None:
        with self.assertRaises(InvalidEscapeSequence) as cm:
            decode_escapes(r"abc\q")
        self.assertEqual(cm.exception.snippet, r"\q")
        self.assertEqual(cm.exception.offset, 3)
        self.assertEqual(cm.exception.kind, "InvalidEscapeSequence")

    def test_trailing_backslash(self) -> None:
        with self.assertRaises(MalformedEscape) as cm:
            decode_escapes("abc\\")
        self.assertEqual(cm.exception.offset, 3)

    def test_match_reports_raw_form(self) -> None:
        tok = EscapeDecoder().match(r"xx\x41yy", 2)
        self.assertEqual(tok.raw, r"\x41")
        self.assertEqual(tok.value, "A")
        self.assertEqual(tok.start, 2)
        self.assertEqual(tok.end, 6)


class EncodeTests(unittest.TestCase):
    def test_canonical_form(self) -> None:
        self.assertEqual(encode_escapes("a\\b\n#{x}"), r"a\\b\n\#{x}")
        self.assertEqual(encode_escapes("\x01bell\a"), r"\x01bell\a")
        self.assertEqual(encode_escapes("# not {interp}"), "# not {interp}")

    def test_decode_inverts_encode(self) -> None:
        for text in ("tab\there", "\\\\", "#{", "é \U0001F600", "\x00\x1f\x7f", ""):
            with self.subTest(text=text):
                self.assertEqual(decode_escapes(encode_escapes(text)), text)

    def test_encode_inverts_decode_for_canonical_templates(self) -> None:
        tpl = r"line\none\\two\#{x}\x01 plain"
        self.assertEqual(encode_escapes(decode_escapes(tpl)), tpl)


if __name__ == "__main__":
    unittest.main()
