"""Public API surface for percentq.processing."""
__all__ = [
    "escapes",
    "words",
]
