"""Diagnostics and debugging utilities for qsparse."""

from .core import (
    assert_bit_constant,
    assert_invariants,
    assert_no_stray_bits,
    assert_normalized,
    assert_pruned,
    state_norm,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reset_debug_from_env,
    set_debug_enabled,
)

__all__ = [
    "state_norm",
    "assert_normalized",
    "assert_pruned",
    "assert_no_stray_bits",
    "assert_bit_constant",
    "assert_invariants",
    "is_debug_enabled",
    "set_debug_enabled",
    "reset_debug_from_env",
    "debug_context",
]
