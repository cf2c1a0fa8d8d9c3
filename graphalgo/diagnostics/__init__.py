"""Diagnostics and debugging utilities for graphalgo."""

from .core import (
    assert_heap_ordered,
    assert_shortest_paths,
    assert_spanning_forest,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_heap_ordered",
    "assert_shortest_paths",
    "assert_spanning_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
