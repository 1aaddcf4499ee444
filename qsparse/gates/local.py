"""Local gate engine: transforms that map one basis entry to one basis entry.

A gate is *local* when the new amplitude of an entry depends on that entry
alone. The key may change (X and Y flip the target bit) but two input
entries never merge. All such gates are described by one closed value type,
:class:`LocalTransform`, so the per-entry loop is a fixed sequence of an
optional XOR and one multiply.
"""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from typing import Dict, Sequence

from ..backend.sparse_state import SparseState
from ..core.basis import location_mask


@dataclass(frozen=True)
class LocalTransform:
    """
    Per-entry gate action.

    Attributes
    ----------
    name:
        Gate label used in logs and reprs.
    flip:
        Whether the target bit of the key is toggled.
    zero_factor:
        Amplitude multiplier when the target bit is 0 after the flip.
    one_factor:
        Amplitude multiplier when the target bit is 1 after the flip.
    """

    name: str
    flip: bool
    zero_factor: complex
    one_factor: complex

    def apply(self, index: int, value: complex, target: int) -> tuple[int, complex]:
        """Transform a single ``(index, value)`` entry."""
        bit = 1 << target
        if self.flip:
            index ^= bit
        return index, value * (self.one_factor if index & bit else self.zero_factor)


_ONE = 1.0 + 0.0j


def x_transform() -> LocalTransform:
    return LocalTransform("X", True, _ONE, _ONE)


def y_transform() -> LocalTransform:
    # Y|0⟩ = i|1⟩, Y|1⟩ = -i|0⟩
    return LocalTransform("Y", True, -1.0j, 1.0j)


def z_transform() -> LocalTransform:
    return phase_transform(-_ONE, name="Z")


def s_transform() -> LocalTransform:
    return phase_transform(1.0j, name="S")


def s_adjoint_transform() -> LocalTransform:
    return phase_transform(-1.0j, name="S_ADJ")


def t_transform() -> LocalTransform:
    return phase_transform(complex(math.sqrt(0.5), math.sqrt(0.5)), name="T")


def t_adjoint_transform() -> LocalTransform:
    return phase_transform(complex(math.sqrt(0.5), -math.sqrt(0.5)), name="T_ADJ")


def rz_transform(theta: float) -> LocalTransform:
    """Rz(θ) = diag(e^{-iθ/2}, e^{iθ/2})."""
    half = float(theta) / 2.0
    return LocalTransform("RZ", False, cmath.exp(-1.0j * half), cmath.exp(1.0j * half))


def phase_transform(phase: complex, name: str = "PHASE") -> LocalTransform:
    """Multiply the |1⟩ component of the target by ``phase``."""
    return LocalTransform(name, False, _ONE, complex(phase))


def apply_local(
    state: SparseState,
    transform: LocalTransform,
    target: int,
    controls: Sequence[int] = (),
) -> None:
    """
    Apply ``transform`` to every entry whose control bits are all set.

    Locations must already be resolved and checked for duplicates. Entries
    failing the control predicate pass through untouched; the store then
    prunes near-zero amplitudes.

    Args:
        state: Sparse state, replaced in place.
        transform: Gate action on a single entry.
        target: Target location.
        controls: Control locations.
    """
    ctl_mask = location_mask(controls)

    new: Dict[int, complex] = {}
    for index, value in state.items():
        if index & ctl_mask == ctl_mask:
            index, value = transform.apply(index, value, target)
        new[index] = value
    state.replace(new)
    state.prune()


__all__ = [
    "LocalTransform",
    "x_transform",
    "y_transform",
    "z_transform",
    "s_transform",
    "s_adjoint_transform",
    "t_transform",
    "t_adjoint_transform",
    "rz_transform",
    "phase_transform",
    "apply_local",
]
