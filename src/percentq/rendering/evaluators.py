"""
evaluators – Built-in interpolation evaluators.

An evaluator is any callable ``(expression_text) -> str``. Two ready-made
ones are provided:

  • MappingEvaluator   #{name} → variables["name"]
  • PythonEvaluator    #{expr} → stringify(eval(expr, namespace))

``stringify`` renders strings as-is and everything else with ``repr``, so
that ``#{"x"}`` yields ``x`` while ``#{[1, 2]}`` yields ``[1, 2]``.
"""

import builtins
from typing import Any, Dict, Mapping, Optional


def stringify(value: Any) -> str:
    """Return *value* unchanged when it is a str, else its ``repr``."""
    if isinstance(value, str):
        return value
    return repr(value)


class MappingEvaluator:
    """Resolve interpolations as variable names.

    The expression text is stripped before lookup. Missing names render as
    an empty string unless *strict* is set, in which case the KeyError
    propagates (and is reported as an evaluation error by the renderer).
    """

    def __init__(self, variables: Optional[Mapping[str, Any]] = None, *, strict: bool = False) -> None:
        self._vars: Dict[str, Any] = dict(variables or {})
        self._strict = strict

    def __call__(self, expression: str) -> str:
        name = expression.strip()
        if name in self._vars:
            return stringify(self._vars[name])
        if self._strict:
            raise KeyError(name)
        return ""


class PythonEvaluator:
    """Evaluate interpolations as Python expressions.

    Expressions see the builtins plus *namespace*. Each evaluation runs
    against a fresh copy, so names bound by one interpolation are not
    visible to the next.
    """

    def __init__(self, namespace: Optional[Mapping[str, Any]] = None) -> None:
        self._namespace: Dict[str, Any] = dict(namespace or {})

    def __call__(self, expression: str) -> str:
        code = compile(expression.strip(), "<interpolation>", "eval")
        scope: Dict[str, Any] = {"__builtins__": builtins, **self._namespace}
        return stringify(eval(code, scope))
