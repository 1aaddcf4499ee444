"""Basis index and amplitude helpers.

A basis index is a plain Python ``int``: bit ``i`` holds the value of the
qubit currently stored at internal location ``i``. Python integers grow
without bound, so the number of qubits is not limited by a machine word.
Amplitudes are Python ``complex`` values (two 64-bit floats).
"""

from __future__ import annotations

from typing import Iterable


def get_bit(index: int, loc: int) -> bool:
    """Return whether bit ``loc`` of ``index`` is set."""
    return (index >> loc) & 1 == 1


def flip_bit(index: int, loc: int) -> int:
    """Return ``index`` with bit ``loc`` toggled."""
    return index ^ (1 << loc)


def location_mask(locs: Iterable[int]) -> int:
    """Build a bitmask with one bit set per location in ``locs``."""
    mask = 0
    for loc in locs:
        mask |= 1 << loc
    return mask


def parity(index: int, mask: int) -> bool:
    """Return True when an odd number of the bits selected by ``mask`` are set."""
    return bin(index & mask).count("1") & 1 == 1


def norm_sqr(value: complex) -> float:
    """Squared magnitude of an amplitude."""
    return value.real * value.real + value.imag * value.imag


def is_nearly_zero(value: complex, epsilon: float) -> bool:
    """
    Return True when ``value`` is too small to be kept in a sparse state.

    Args:
        value: Amplitude or matrix coefficient.
        epsilon: Threshold on the squared magnitude.
    """
    return norm_sqr(value) < epsilon
