from __future__ import annotations
"""Renderer protocol definitions."""

from typing import List, Protocol, Union, runtime_checkable

from percentq.core.models import RenderMode


@runtime_checkable
class TemplateRendererProtocol(Protocol):
    """Protocol for the four template transforms.

    Methods:
        render: Dispatch on a RenderMode.
        render_raw: Identity transform.
        render_interpolated: Escapes and interpolations expanded.
        render_raw_words: Escape-aware whitespace split, nothing expanded.
        render_interpolated_words: Split with escapes and interpolations expanded.
    """

    def render(self, text: str, mode: RenderMode) -> Union[str, List[str]]:
        ...

    def render_raw(self, text: str) -> str:
        ...

    def render_interpolated(self, text: str) -> str:
        ...

    def render_raw_words(self, text: str) -> List[str]:
        ...

    def render_interpolated_words(self, text: str) -> List[str]:
        ...
