"""Diagnostic checks for sparse quantum states."""

from __future__ import annotations

import math

from ..backend.sparse_state import SparseState
from ..core.basis import get_bit, is_nearly_zero


def state_norm(state: SparseState) -> float:
    """
    Compute the L2 norm of a sparse state.

    Parameters
    ----------
    state:
        Sparse state to inspect.

    Returns
    -------
    float
        ``sqrt(sum |amplitude|^2)``; 0.0 for an empty state.
    """
    return math.sqrt(state.total_probability())


def assert_normalized(state: SparseState, atol: float = 1e-10) -> None:
    """
    Assert that the squared magnitudes of ``state`` sum to 1.

    Parameters
    ----------
    state:
        Sparse state to check.
    atol:
        Absolute tolerance on the total probability.

    Raises
    ------
    ValueError
        If the total probability is not finite or differs from 1 by more
        than ``atol``.
    """
    total = state.total_probability()
    if not math.isfinite(total):
        raise ValueError("State norm contains non-finite values.")
    if abs(total - 1.0) > atol:
        raise ValueError(
            f"State is not normalized within tolerance {atol}. "
            f"Total probability found: {total!r} (norm {state_norm(state)!r})"
        )


def assert_pruned(state: SparseState) -> None:
    """
    Assert that no stored amplitude is below the state's pruning threshold.

    Raises
    ------
    ValueError
        On the first near-zero entry found.
    """
    for index, value in state.items():
        if is_nearly_zero(value, state.epsilon):
            raise ValueError(
                f"Basis entry {index} holds near-zero amplitude {value!r}."
            )


def assert_no_stray_bits(state: SparseState, n_qubits: int) -> None:
    """
    Assert that no key uses a bit position at or above ``n_qubits``.

    Raises
    ------
    ValueError
        If some key is too wide for the register.
    """
    width = state.max_bit_length()
    if width > n_qubits:
        raise ValueError(
            f"State uses bit position {width - 1} but only {n_qubits} "
            "qubits are allocated."
        )


def assert_bit_constant(state: SparseState, loc: int) -> None:
    """
    Assert that every key holds the same value at bit ``loc``.

    This is what a collapse onto a single qubit guarantees, and what
    releasing a qubit relies on before it drops that bit.

    Raises
    ------
    ValueError
        If both values of the bit occur.
    """
    seen = {get_bit(index, loc) for index in state.keys()}
    if len(seen) > 1:
        raise ValueError(f"Bit {loc} is not constant across the state.")


def assert_invariants(state: SparseState, n_qubits: int, atol: float = 1e-10) -> None:
    """
    Run every structural check on a state that has qubits allocated.

    An empty register must have an empty state.

    Raises
    ------
    ValueError
        If any invariant is violated.
    """
    if n_qubits == 0:
        if len(state) != 0:
            raise ValueError("State must be empty when no qubits are allocated.")
        return
    assert_pruned(state)
    assert_no_stray_bits(state, n_qubits)
    assert_normalized(state, atol=atol)
