"""
percentq.utils – Small shared utilities (dynamic imports).
"""
from .imports import load_object_from_ref

__all__ = ["load_object_from_ref"]
