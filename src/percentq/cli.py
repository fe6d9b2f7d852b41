from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, NoReturn, Optional, Sequence, TextIO, Union

from percentq.core.interfaces import EvaluatorProtocol, LoggerFactoryProtocol, TemplateRendererProtocol
from percentq.core.models import RenderMode
from percentq.errors import TemplateError
from percentq.logging.factory import DefaultLoggerFactory
from percentq.logging.helpers import get_logger
from percentq.parsing.parser import _build_parser
from percentq.rendering.evaluators import MappingEvaluator, PythonEvaluator
from percentq.rendering.renderer import TemplateRenderer
from percentq.utils.imports import load_object_from_ref


logger = get_logger('cli')


class UsageError(Exception):
    """Invalid CLI input detected after argument parsing (exit code 2)."""


def _configure_logging(enable_json: bool) -> None:
    """Configure process-wide logging, reconfiguring only when the JSON/plain choice changes."""
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev is not None and prev == bool(enable_json):
        return
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=logging.INFO)
    factory.get_logger('cli')
    setattr(_configure_logging, '_configured_mode', bool(enable_json))


def _parse_items(items: Optional[List[str]]) -> Dict[str, str]:
    env_map: Dict[str, str] = {}
    for itm in items or []:
        if '=' not in itm:
            raise UsageError(f"--env expects VAR=VAL (got '{itm}')")
        key, val = itm.split('=', 1)
        env_map[key] = val
    return env_map


def _make_evaluator(ns: argparse.Namespace) -> EvaluatorProtocol:
    """Build the interpolation evaluator according to CLI flags.

    Resolution order:
        1) --evaluator / PERCENTQ_EVALUATOR ('module.path:attr')
        2) --python → PythonEvaluator over the variables
        3) MappingEvaluator over the variables (default)
    """
    ref = (ns.evaluator_ref or os.getenv('PERCENTQ_EVALUATOR') or '').strip()
    if ref:
        try:
            obj = load_object_from_ref(ref)
        except ImportError as exc:
            raise UsageError(f'failed to load evaluator {ref!r}: {exc}') from exc
        if isinstance(obj, type):
            obj = obj()
        if not callable(obj):
            raise UsageError(f'evaluator {ref!r} is not callable')
        logger.debug('using evaluator %r', ref)
        return obj

    variables: Dict[str, str] = dict(os.environ) if ns.os_env else {}
    variables.update(_parse_items(ns.env_items))
    if ns.python_eval:
        return PythonEvaluator(variables)
    return MappingEvaluator(variables, strict=ns.strict)


def _read_template(source: str, stdin: Optional[TextIO]) -> tuple[str, Optional[Path]]:
    if source == '-':
        return (stdin or sys.stdin).read(), None
    path = Path(source)
    if not path.is_file():
        raise UsageError(f'template file {path} not found')
    return path.read_text(encoding='utf-8'), path


def _format_result(result: Union[str, List[str]], *, as_json: bool) -> str:
    if as_json:
        return json.dumps(result, ensure_ascii=False) + '\n'
    if isinstance(result, str):
        return result
    return ''.join(f'{word}\n' for word in result)


class PercentQ:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
        """Run the tool with an argv-like sequence and return the output text.

        The text is also written to -o FILE when given, else to *stdout* if
        one is passed.

        Raises:
            UsageError: bad variables, evaluator reference or input file.
            TemplateError: the template failed to render; the located error
                has already been logged.
        """
        ns = _build_parser().parse_args(list(argv))
        _configure_logging(ns.json_logs or os.getenv('PERCENTQ_JSON_LOGS') == '1')

        mode = RenderMode.from_name(ns.mode)
        renderer: TemplateRendererProtocol = TemplateRenderer(_make_evaluator(ns) if mode.expands else None)
        text, path = _read_template(ns.file, stdin)

        try:
            result = renderer.render(text, mode)
        except TemplateError as exc:
            loc = exc.locate(text, path)
            logger.error(
                '%s at %s (offset %d): %r%s',
                exc.kind,
                loc.format(),
                exc.offset,
                exc.snippet,
                f' ({exc.message})' if exc.message else '',
            )
            raise

        out = _format_result(result, as_json=ns.json_output)
        if ns.output:
            Path(ns.output).write_text(out, encoding='utf-8')
            logger.info('wrote %s', ns.output)
        elif stdout is not None:
            stdout.write(out)
            stdout.flush()
        return out


def main() -> NoReturn:
    """Entry point for `percentq` and `python -m percentq`."""
    argv = sys.argv[1:]
    try:
        PercentQ.run(argv, stdout=sys.stdout)
        raise SystemExit(0)
    except TemplateError:
        raise SystemExit(1)
    except UsageError as exc:
        logger.error('%s', exc)
        raise SystemExit(2)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
