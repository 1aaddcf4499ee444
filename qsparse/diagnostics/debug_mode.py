"""Process-wide switch for invariant checking.

With debug mode on, :class:`~qsparse.simulator.SparseSimulator` re-runs the
sparse-state invariant checks after every mutating call and asserts that a
released qubit's bit is constant before dropping it. The initial value comes
from the ``QSPARSE_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

DEBUG_ENV_VAR = "QSPARSE_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env() -> bool:
    return os.getenv(DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn invariant checking on or off for the whole process.

    Args:
        enabled: New value of the flag.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def reset_debug_from_env() -> bool:
    """Re-read ``QSPARSE_DEBUG`` and return the resulting flag."""
    set_debug_enabled(_flag_from_env())
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily override debug mode, restoring the previous value on exit.

    Example:
        >>> with debug_context(True):
        ...     sim.h(q)  # invariants checked after the gate
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = previous
