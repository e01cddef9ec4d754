"""Diagnostics and debugging utilities for subgrad."""

from .core import (
    assert_dimension,
    assert_finite,
    inf_norm,
    is_finite,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "inf_norm",
    "is_finite",
    "assert_finite",
    "assert_dimension",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
