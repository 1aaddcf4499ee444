"""Joint-parity measurement and state collapse on a sparse state.

A (joint) measurement over a set of locations reports the parity of the
selected bits. Measuring a single location is the one-element case.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import torch

from ..backend.sparse_state import SparseState
from ..core.basis import location_mask, parity


def joint_probability(state: SparseState, locs: Sequence[int]) -> float:
    """
    Probability that a parity measurement over ``locs`` yields 1.

    The odd-parity mass is divided by the total mass, so a state that was
    just collapsed reports exactly 0.0 or 1.0 instead of a value one ulp
    away.

    Args:
        state: Sparse state.
        locs: Resolved, distinct locations.

    Returns:
        A float in [0, 1]. An empty state or empty ``locs`` gives 0.0.
    """
    even, odd = state.parity_weights(location_mask(locs))
    total = even + odd
    if total <= 0.0 or odd <= 0.0:
        return 0.0
    if even <= 0.0:
        return 1.0
    return min(1.0, odd / total)


def collapse(state: SparseState, locs: Sequence[int], outcome: bool) -> None:
    """
    Keep only entries whose parity over ``locs`` equals ``outcome`` and
    renormalize them.

    Raises:
        ValueError: If no probability mass is consistent with ``outcome``.
    """
    if len(state) == 0:
        return

    mask = location_mask(locs)
    kept: Dict[int, complex] = {
        index: value
        for index, value in state.items()
        if parity(index, mask) == outcome
    }
    if not kept:
        raise ValueError(
            f"Cannot collapse to outcome {int(outcome)}: it has zero probability."
        )
    state.replace(kept)
    state.renormalize()


def draw_sample(generator: Optional[torch.Generator] = None) -> float:
    """
    Draw one uniform sample in [0, 1).

    Args:
        generator: Optional torch.Generator for reproducibility. When None,
            torch's default generator is used.
    """
    sample = torch.rand((), generator=generator, dtype=torch.float64)
    return float(sample.item())


def measure_locations(
    state: SparseState,
    locs: Sequence[int],
    generator: Optional[torch.Generator] = None,
) -> bool:
    """
    Sample a parity outcome over ``locs`` and collapse ``state`` onto it.

    One sample decides the outcome for the whole group: the result is 1
    when the sample falls below the odd-parity probability.

    Returns:
        The measured parity as a bool.
    """
    sample = draw_sample(generator)
    outcome = sample < joint_probability(state, locs)
    collapse(state, locs, outcome)
    return outcome


__all__ = [
    "joint_probability",
    "collapse",
    "draw_sample",
    "measure_locations",
]
