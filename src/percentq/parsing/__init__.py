"""Public API surface for percentq.parsing."""
__all__ = [
    "interpolation",
    "parser",
    "scanner",
    "source",
]
