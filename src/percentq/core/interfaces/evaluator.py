from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class EvaluatorProtocol(Protocol):
    """Maps the verbatim text of one interpolation to its string rendering.

    Any exception raised is reported as an InterpolationEvaluationError.
    """

    def __call__(self, expression: str) -> str:
        ...
