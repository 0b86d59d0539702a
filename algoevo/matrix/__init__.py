"""
Matrix derivation: evolution matrix views, technology rows and evolution links.
"""
from .assembler import (
    baseline_matrix,
    build_matrix,
    dynamic_matrix,
    hide_unchanged,
    integrated_matrix,
)
from .links import evolution_view, resolve_reference
from .rows import build_rows

__all__ = [
    "baseline_matrix",
    "build_matrix",
    "dynamic_matrix",
    "hide_unchanged",
    "integrated_matrix",
    "evolution_view",
    "resolve_reference",
    "build_rows",
]
