from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from percentq import MappingEvaluator, PythonEvaluator, RenderMode, stringify  # noqa: E402
from percentq.utils.imports import load_object_from_ref  # noqa: E402


class StringifyTests(unittest.TestCase):
    def test_strings_pass_through(self) -> None:
        self.assertEqual(stringify("x"), "x")
        self.assertEqual(stringify(""), "")

    def test_other_values_use_repr(self) -> None:
        self.assertEqual(stringify(3), "3")
        self.assertEqual(stringify([1, "a"]), "[1, 'a']")
        self.assertEqual(stringify(None), "None")


class MappingEvaluatorTests(unittest.TestCase):
    def test_lookup_strips_expression(self) -> None:
        ev = MappingEvaluator({"name": "Brian", "n": 42})
        self.assertEqual(ev(" name "), "Brian")
        self.assertEqual(ev("n"), "42")

    def test_missing_renders_empty(self) -> None:
        self.assertEqual(MappingEvaluator()("nope"), "")

    def test_strict_missing_raises(self) -> None:
        with self.assertRaises(KeyError):
            MappingEvaluator({}, strict=True)("nope")


class PythonEvaluatorTests(unittest.TestCase):
    def test_expression_against_namespace(self) -> None:
        ev = PythonEvaluator({"name": "zab", "xs": [1, 2, 3]})
        self.assertEqual(ev(" name[::-1] "), "baz")
        self.assertEqual(ev("len(xs)"), "3")

    def test_comprehension_sees_namespace(self) -> None:
        ev = PythonEvaluator({"n": 2, "xs": [1, 2]})
        self.assertEqual(ev("[x * n for x in xs]"), "[2, 4]")

    def test_multiline_expression(self) -> None:
        self.assertEqual(PythonEvaluator()("\n  (1 +\n   2)\n"), "3")

    def test_syntax_error_propagates(self) -> None:
        with self.assertRaises(SyntaxError):
            PythonEvaluator()("1 +")

    def test_evaluations_are_isolated(self) -> None:
        ev = PythonEvaluator({"a": 1})
        self.assertEqual(ev("(b := a + 1)"), "2")
        with self.assertRaises(NameError):
            ev("b")


class LoadObjectTests(unittest.TestCase):
    def test_module_attribute(self) -> None:
        import json

        self.assertIs(load_object_from_ref("json:dumps"), json.dumps)

    def test_dotted_attribute(self) -> None:
        self.assertIs(load_object_from_ref("percentq:RenderMode.RAW"), RenderMode.RAW)

    def test_errors(self) -> None:
        for ref in ("json", "json:", ":dumps", "no_such_module_xyz:f", "json:nope"):
            with self.subTest(ref=ref):
                with self.assertRaises(ImportError):
                    load_object_from_ref(ref)


if __name__ == "__main__":
    unittest.main()
