# percentq/parsing/parser.py
from __future__ import annotations

import argparse

from percentq.constants import DEFAULT_MODE, MODE_ALIASES


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Variables given with -e/-E feed the default mapping evaluator, or
          become the namespace of the Python evaluator under --python.
        - --evaluator takes precedence over --python.
    """
    p = argparse.ArgumentParser(
        prog="percentq",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "percentq – percent-literal style template renderer\n"
            "Reads a template from FILE (or stdin) and prints it rendered in one of\n"
            "the q / qq / w / ww modes."
        ),
    )

    g_in = p.add_argument_group("Input & mode")
    g_ev = p.add_argument_group("Interpolation")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Input & mode
    # -----------------------
    g_in.add_argument(
        "file",
        nargs="?",
        default="-",
        metavar="FILE",
        help="Template file to render. '-' or omitted reads standard input.",
    )
    g_in.add_argument(
        "-m",
        "--mode",
        choices=MODE_ALIASES,
        default=DEFAULT_MODE,
        help=(
            "q  : raw string, returned unchanged\n"
            "qq : escapes decoded, #{...} interpolated (default)\n"
            "w  : raw word list, split on unescaped whitespace\n"
            "ww : word list with escapes decoded and #{...} interpolated"
        ),
    )

    # -----------------------
    # Interpolation
    # -----------------------
    g_ev.add_argument(
        "-e",
        "--env",
        metavar="VAR=VAL",
        action="append",
        dest="env_items",
        help="Define a variable available to interpolations. Repeatable.",
    )
    g_ev.add_argument(
        "-E",
        "--os-env",
        action="store_true",
        dest="os_env",
        help="Expose the process environment as variables (-e values win).",
    )
    g_ev.add_argument(
        "--strict",
        action="store_true",
        help="Fail on interpolation of an undefined variable instead of rendering ''.",
    )
    g_ev.add_argument(
        "--python",
        action="store_true",
        dest="python_eval",
        help=(
            "Evaluate #{...} as Python expressions. Variables become the namespace;\n"
            "strings render as-is, other values with repr()."
        ),
    )
    g_ev.add_argument(
        "--evaluator",
        metavar="MODULE:ATTR",
        dest="evaluator_ref",
        help=(
            "Custom evaluator: a callable (str) -> str, or a class instantiated\n"
            "without arguments. Defaults to $PERCENTQ_EVALUATOR."
        ),
    )

    # -----------------------
    # Output
    # -----------------------
    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Write the result to FILE instead of standard output.",
    )
    g_out.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Emit the result as JSON (an array of strings in w/ww modes).",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit log records as JSON lines on stderr (also PERCENTQ_JSON_LOGS=1).",
    )
    return p
