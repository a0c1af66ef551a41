"""Diagnostics and debugging utilities for Graph Conduit."""

from .core import (
    assert_disjoint_set_consistent,
    assert_sorted_adjacency,
    assert_symmetric,
    find_asymmetry,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "find_asymmetry",
    "is_symmetric",
    "assert_symmetric",
    "assert_sorted_adjacency",
    "assert_disjoint_set_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
