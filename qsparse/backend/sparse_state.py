"""Sparse amplitude store for pure quantum states.

The state is a dictionary from basis index (``int``) to amplitude
(``complex``). Only non-negligible amplitudes are stored, so circuits that
keep most of the Hilbert space empty (GHZ chains, classical reversible
logic, shallow entanglers) need memory proportional to the number of basis
states actually populated rather than ``2**n``.

Invariants after every mutation performed through the simulator:

- no stored amplitude has squared magnitude below ``epsilon``;
- the squared magnitudes sum to 1;
- no key uses a bit position at or above the current qubit count.
"""

from __future__ import annotations

import math
from typing import Dict, ItemsView, Iterator, KeysView, List, Optional, Tuple

from ..core.basis import is_nearly_zero, norm_sqr, parity
from ..core.config import DEFAULT_CONFIG


class SparseState:
    """
    Mapping from basis index to amplitude plus the pruning and
    normalization policies that keep it consistent.

    Gate engines build a fresh dictionary, hand it back through
    :meth:`replace` and then call :meth:`prune`; collapse hands back the
    surviving entries and calls :meth:`renormalize`. The store never exposes
    its dictionary for in-place mutation.
    """

    def __init__(
        self,
        amplitudes: Optional[Dict[int, complex]] = None,
        epsilon: float = DEFAULT_CONFIG.near_zero_epsilon,
    ) -> None:
        self.epsilon = float(epsilon)
        self._amps: Dict[int, complex] = {}
        if amplitudes is not None:
            self._amps = {int(k): complex(v) for k, v in amplitudes.items()}

    def __len__(self) -> int:
        return len(self._amps)

    def __contains__(self, index: object) -> bool:
        return index in self._amps

    def __getitem__(self, index: int) -> complex:
        return self._amps[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._amps)

    def __repr__(self) -> str:
        return f"SparseState(entries={len(self._amps)})"

    def get(self, index: int, default: complex = 0j) -> complex:
        return self._amps.get(index, default)

    def items(self) -> ItemsView[int, complex]:
        return self._amps.items()

    def keys(self) -> KeysView[int]:
        return self._amps.keys()

    def to_dict(self) -> Dict[int, complex]:
        """Return a copy of the underlying amplitude dictionary."""
        return dict(self._amps)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset_ground(self) -> None:
        """Seed the all-zero ground state |0...0⟩."""
        self._amps = {0: 1.0 + 0.0j}

    def clear(self) -> None:
        self._amps = {}

    def replace(self, amplitudes: Dict[int, complex]) -> None:
        """Swap in a newly built amplitude dictionary."""
        self._amps = amplitudes

    # ------------------------------------------------------------------
    # Basis permutations
    # ------------------------------------------------------------------

    def swap_qubit_state(self, loc_a: int, loc_b: int) -> None:
        """
        Exchange bit positions ``loc_a`` and ``loc_b`` in every key.

        Keys whose two bits agree are unchanged; the others get both bits
        flipped. This is a bijection on basis indices, so the number of
        entries never changes.
        """
        if loc_a == loc_b:
            return

        both = (1 << loc_a) | (1 << loc_b)
        bit_a = 1 << loc_a
        bit_b = 1 << loc_b
        new: Dict[int, complex] = {}
        for index, value in self._amps.items():
            if bool(index & bit_a) != bool(index & bit_b):
                index ^= both
            new[index] = value
        self._amps = new

    def clear_bit(self, loc: int) -> None:
        """
        Clear bit ``loc`` in every key.

        Only valid when every key holds the same value at ``loc`` (as after
        collapsing that qubit); otherwise distinct entries would merge.
        """
        keep = ~(1 << loc)
        self._amps = {index & keep: value for index, value in self._amps.items()}

    # ------------------------------------------------------------------
    # Pruning and normalization policies
    # ------------------------------------------------------------------

    def prune(self) -> None:
        """Drop every entry whose squared magnitude is below ``epsilon``."""
        eps = self.epsilon
        self._amps = {
            index: value
            for index, value in self._amps.items()
            if not is_nearly_zero(value, eps)
        }

    def total_probability(self) -> float:
        """Sum of squared magnitudes over all stored entries."""
        return math.fsum(norm_sqr(value) for value in self._amps.values())

    def parity_weights(self, mask: int) -> Tuple[float, float]:
        """
        Return ``(even, odd)``: the probability mass of entries whose key has
        even or odd parity under ``mask``.
        """
        even: List[float] = []
        odd: List[float] = []
        for index, value in self._amps.items():
            if parity(index, mask):
                odd.append(norm_sqr(value))
            else:
                even.append(norm_sqr(value))
        return math.fsum(even), math.fsum(odd)

    def renormalize(self) -> None:
        """Rescale every amplitude by ``1/sqrt(total probability)``."""
        total = self.total_probability()
        if total <= 0.0:
            raise ValueError("Cannot renormalize a state with zero total mass.")
        scale = 1.0 / math.sqrt(total)
        self._amps = {index: value * scale for index, value in self._amps.items()}

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def sorted_items(self) -> List[Tuple[int, complex]]:
        """Entries in ascending basis-index order."""
        return sorted(self._amps.items())

    def max_bit_length(self) -> int:
        """Number of bit positions needed to represent the largest key."""
        return max((index.bit_length() for index in self._amps), default=0)


__all__ = ["SparseState"]
