"""Mapping between caller-visible qubit ids and internal bit locations.

Identifiers are stable handles handed out by :meth:`QubitMap.allocate`.
Locations are the bit positions used in basis indices and always form the
contiguous range ``[0, n)``; releasing a qubit moves the qubit occupying the
last location into the freed slot so no gaps appear.
"""

from __future__ import annotations

import heapq
from typing import Dict, List, Sequence

from ..errors import duplicate_qubit, unknown_qubit


class QubitMap:
    """Bijection between live qubit ids and the locations ``0..n-1``."""

    def __init__(self) -> None:
        self._id_to_loc: Dict[int, int] = {}
        self._loc_to_id: List[int] = []
        # Ids below _next_id that are not live, kept as a min-heap.
        self._free_ids: List[int] = []
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._loc_to_id)

    def __contains__(self, qubit_id: object) -> bool:
        return qubit_id in self._id_to_loc

    def __repr__(self) -> str:
        return f"QubitMap({self.as_dict()})"

    def as_dict(self) -> Dict[int, int]:
        """Return ``{id: location}`` sorted by id."""
        return {qid: self._id_to_loc[qid] for qid in sorted(self._id_to_loc)}

    def sorted_ids(self) -> List[int]:
        return sorted(self._id_to_loc)

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------

    def allocate(self) -> int:
        """
        Register a new qubit at location ``n`` and return its id.

        The id is the smallest non-negative integer not currently live, so
        ids freed by earlier releases are handed out again first.
        """
        if self._free_ids:
            qubit_id = heapq.heappop(self._free_ids)
        else:
            qubit_id = self._next_id
            self._next_id += 1

        self._id_to_loc[qubit_id] = len(self._loc_to_id)
        self._loc_to_id.append(qubit_id)
        return qubit_id

    def remove_last(self, qubit_id: int) -> None:
        """
        Forget ``qubit_id``, which must occupy the last location.

        Raises:
            UsageError: If ``qubit_id`` is not live.
            ValueError: If ``qubit_id`` does not hold the last location.
        """
        loc = self.location(qubit_id)
        if loc != len(self._loc_to_id) - 1:
            raise ValueError(
                f"Qubit {qubit_id} is at location {loc}, "
                f"expected last location {len(self._loc_to_id) - 1}."
            )
        del self._id_to_loc[qubit_id]
        self._loc_to_id.pop()
        heapq.heappush(self._free_ids, qubit_id)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def location(self, qubit_id: int) -> int:
        """
        Return the location of a live qubit.

        Raises:
            UsageError: If ``qubit_id`` is not live.
        """
        try:
            return self._id_to_loc[qubit_id]
        except (KeyError, TypeError):
            raise unknown_qubit(qubit_id) from None

    def locations(self, qubit_ids: Sequence[int]) -> List[int]:
        return [self.location(qid) for qid in qubit_ids]

    def id_at(self, loc: int) -> int:
        """Return the id stored at ``loc``."""
        return self._loc_to_id[loc]

    @staticmethod
    def check_distinct(qubit_ids: Sequence[int]) -> None:
        """
        Raise if any id appears more than once.

        The smallest repeated id is reported.

        Raises:
            UsageError: On the first duplicate in sorted order.
        """
        ordered = sorted(qubit_ids)
        for previous, current in zip(ordered, ordered[1:]):
            if previous == current:
                raise duplicate_qubit(current)

    # ------------------------------------------------------------------
    # Relabeling
    # ------------------------------------------------------------------

    def swap_ids(self, qubit_a: int, qubit_b: int) -> None:
        """Exchange the locations assigned to two live ids."""
        loc_a = self.location(qubit_a)
        loc_b = self.location(qubit_b)
        self._id_to_loc[qubit_a] = loc_b
        self._id_to_loc[qubit_b] = loc_a
        self._loc_to_id[loc_a] = qubit_b
        self._loc_to_id[loc_b] = qubit_a

    def swap_locations(self, loc_a: int, loc_b: int) -> None:
        """Exchange which ids occupy two locations."""
        self.swap_ids(self.id_at(loc_a), self.id_at(loc_b))


__all__ = ["QubitMap"]
