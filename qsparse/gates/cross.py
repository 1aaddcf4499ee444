"""Cross-entry gate engine for Hadamard and single-axis rotations.

These gates mix the two basis states that differ only in the target bit, so
an output amplitude can depend on two stored entries. The engine walks the
old state once and builds a new one, handling each such pair exactly once.
"""

from __future__ import annotations

import math
from typing import Dict, Sequence, Tuple

from ..backend.sparse_state import SparseState
from ..core.basis import flip_bit, is_nearly_zero, location_mask
from .local import apply_local, x_transform, y_transform

_INV_SQRT2 = 1.0 / math.sqrt(2.0)

Coefficients = Tuple[complex, complex, complex, complex]

HADAMARD_COEFFICIENTS: Coefficients = (
    complex(_INV_SQRT2),
    complex(_INV_SQRT2),
    complex(_INV_SQRT2),
    complex(-_INV_SQRT2),
)


def rotation_coefficients(theta: float, sign_flip: bool) -> Coefficients:
    """
    Matrix entries ``(m00, m01, m10, m11)`` of Rx(θ) or Ry(θ).

    Rx(θ) = [[cos, -i sin], [-i sin, cos]] (``sign_flip=False``);
    Ry(θ) = [[cos, -sin], [sin, cos]] (``sign_flip=True``), with all
    trigonometric functions taken at θ/2.
    """
    half = float(theta) / 2.0
    m00 = complex(math.cos(half), 0.0)
    m01 = complex(0.0, -math.sin(half))
    if sign_flip:
        m01 *= -1.0j
        m10 = -m01
    else:
        m10 = m01
    return m00, m01, m10, m00


def apply_pair_transform(
    state: SparseState,
    coefficients: Coefficients,
    target: int,
    controls: Sequence[int] = (),
) -> None:
    """
    Apply a 2×2 unitary on ``target`` to every entry with all controls set.

    For an entry ``v`` whose flipped partner is absent, the outputs are the
    column of the matrix selected by the entry's target bit scaled by ``v``.
    When the partner is present the pair ``(v0, v1)`` is combined once, on
    the visit of the bit-0 member:

        out0 = m00 * v0 + m01 * v1
        out1 = m10 * v0 + m11 * v1

    Args:
        state: Sparse state, replaced in place.
        coefficients: ``(m00, m01, m10, m11)``.
        target: Target location.
        controls: Control locations, already checked for duplicates.
    """
    m00, m01, m10, m11 = coefficients
    ctl_mask = location_mask(controls)
    bit = 1 << target
    old = state

    new: Dict[int, complex] = {}
    for index, value in old.items():
        if index & ctl_mask != ctl_mask:
            new[index] = value
            continue

        flipped = flip_bit(index, target)
        if flipped not in old:
            if index & bit:
                new[flipped] = value * m01
                new[index] = value * m11
            else:
                new[index] = value * m00
                new[flipped] = value * m10
        elif not index & bit:
            partner = old[flipped]
            new[index] = m00 * value + m01 * partner
            new[flipped] = m10 * value + m11 * partner

    state.replace(new)
    state.prune()


def apply_hadamard(
    state: SparseState,
    target: int,
    controls: Sequence[int] = (),
) -> None:
    """Apply a (multi-controlled) Hadamard to ``target``."""
    apply_pair_transform(state, HADAMARD_COEFFICIENTS, target, controls)


def apply_rotation(
    state: SparseState,
    theta: float,
    target: int,
    controls: Sequence[int] = (),
    sign_flip: bool = False,
) -> None:
    """
    Apply a (multi-controlled) Rx (``sign_flip=False``) or Ry
    (``sign_flip=True``) rotation.

    Angles where the diagonal vanishes reduce to a Pauli flip and are sent
    to the local engine (Y for Ry, X for Rx); angles where the off-diagonal
    vanishes leave the state untouched.
    """
    coefficients = rotation_coefficients(theta, sign_flip)
    m00, m01 = coefficients[0], coefficients[1]

    if is_nearly_zero(m00, state.epsilon):
        # Up to global phase Rx(π) = X and Ry(π) = Y.
        transform = y_transform() if sign_flip else x_transform()
        apply_local(state, transform, target, controls)
    elif is_nearly_zero(m01, state.epsilon):
        return
    else:
        apply_pair_transform(state, coefficients, target, controls)


__all__ = [
    "HADAMARD_COEFFICIENTS",
    "rotation_coefficients",
    "apply_pair_transform",
    "apply_hadamard",
    "apply_rotation",
]
