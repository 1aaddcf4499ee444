"""Sparse state quantum simulator.

:class:`SparseSimulator` ties together the qubit id map, the sparse
amplitude store, the two gate engines and the measurement engine behind the
operation surface a quantum runtime calls: allocate and release qubits,
apply (multi-controlled) gates, measure, and dump the state.

Example:
    >>> sim = SparseSimulator(seed=7)
    >>> ctl = sim.allocate()
    >>> sim.h(ctl)
    >>> targets = [sim.allocate() for _ in range(3)]
    >>> for q in targets:
    ...     sim.mcx([ctl], q)
    >>> len(sim.state)
    2
"""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO, Tuple

import torch

from .backend.qubit_map import QubitMap
from .backend.sparse_state import SparseState
from .core.config import DEFAULT_CONFIG, SimulatorConfig
from .diagnostics import assert_bit_constant, assert_invariants, is_debug_enabled
from .gates.cross import apply_hadamard, apply_rotation
from .gates.local import (
    LocalTransform,
    apply_local,
    phase_transform,
    rz_transform,
    s_adjoint_transform,
    s_transform,
    t_adjoint_transform,
    t_transform,
    x_transform,
    y_transform,
    z_transform,
)
from .logging import get_logger
from .measurement.collapse import joint_probability, measure_locations

logger = get_logger(__name__)

_X = x_transform()
_Y = y_transform()
_Z = z_transform()
_S = s_transform()
_S_ADJ = s_adjoint_transform()
_T = t_transform()
_T_ADJ = t_adjoint_transform()


class SparseSimulator:
    """
    Pure-state simulator storing only the non-zero amplitudes.

    Each instance owns one state and is not safe for concurrent mutation.

    Args:
        seed: Seed for the measurement generator. Mutually exclusive with
            ``generator``.
        generator: torch.Generator used for measurement samples. When
            neither ``seed`` nor ``generator`` is given, a fresh generator
            with a non-deterministic seed is created.
        config: Numerical tolerances. Defaults to :data:`DEFAULT_CONFIG`.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        generator: Optional[torch.Generator] = None,
        config: Optional[SimulatorConfig] = None,
    ) -> None:
        if seed is not None and generator is not None:
            raise ValueError("Pass either seed or generator, not both.")

        if generator is None:
            generator = torch.Generator()
            if seed is not None:
                generator.manual_seed(int(seed))
            else:
                generator.seed()

        self.config = config if config is not None else DEFAULT_CONFIG
        self._generator = generator
        self._state = SparseState(epsilon=self.config.near_zero_epsilon)
        self._map = QubitMap()

    def __repr__(self) -> str:
        return (
            f"SparseSimulator(num_qubits={len(self._map)}, "
            f"entries={len(self._state)})"
        )

    @property
    def num_qubits(self) -> int:
        """Number of currently allocated qubits."""
        return len(self._map)

    @property
    def qubit_ids(self) -> List[int]:
        """Live qubit ids in ascending order."""
        return self._map.sorted_ids()

    @property
    def state(self) -> SparseState:
        """The sparse amplitude store. Treat as read-only."""
        return self._state

    @property
    def generator(self) -> torch.Generator:
        return self._generator

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve(self, target: int, controls: Sequence[int]) -> Tuple[int, List[int]]:
        target_loc = self._map.location(target)
        control_locs = self._map.locations(controls)
        QubitMap.check_distinct([*controls, target])
        return target_loc, control_locs

    def _resolve_distinct(self, qubit_ids: Sequence[int]) -> List[int]:
        QubitMap.check_distinct(qubit_ids)
        return self._map.locations(qubit_ids)

    def _after_mutation(self) -> None:
        if is_debug_enabled():
            self.check_invariants()

    def _apply_local(
        self, transform: LocalTransform, controls: Sequence[int], target: int
    ) -> None:
        target_loc, control_locs = self._resolve(target, controls)
        apply_local(self._state, transform, target_loc, control_locs)
        self._after_mutation()

    def check_invariants(self) -> None:
        """
        Verify normalization, pruning and register width of the state.

        Raises:
            ValueError: If an invariant does not hold.
        """
        assert_invariants(self._state, len(self._map), atol=self.config.norm_atol)

    # ------------------------------------------------------------------
    # Qubit management
    # ------------------------------------------------------------------

    def allocate(self) -> int:
        """
        Allocate a qubit in |0⟩ and return its id.

        The id is the lowest one not currently in use, so released ids are
        reused. The first allocation seeds the ground state.
        """
        if len(self._map) == 0:
            self._state.reset_ground()
        qubit_id = self._map.allocate()
        logger.debug(
            "Allocated qubit %d at location %d", qubit_id, self._map.location(qubit_id)
        )
        return qubit_id

    def release(self, qubit_id: int, generator: Optional[torch.Generator] = None) -> None:
        """
        Release a qubit, measuring it and discarding the outcome.

        The qubit is first moved to the last location so that removing it
        leaves the remaining locations contiguous.

        Args:
            qubit_id: Id of a live qubit.
            generator: Optional generator overriding the simulator's own for
                the internal measurement.

        Raises:
            UsageError: If ``qubit_id`` is not live.
        """
        loc = self._map.location(qubit_id)
        last = len(self._map) - 1
        if loc != last:
            self._state.swap_qubit_state(loc, last)
            self._map.swap_locations(loc, last)

        outcome = measure_locations(
            self._state, [last], generator if generator is not None else self._generator
        )
        if is_debug_enabled():
            assert_bit_constant(self._state, last)
        self._map.remove_last(qubit_id)

        if len(self._map) == 0:
            self._state.clear()
        else:
            self._state.clear_bit(last)

        logger.debug("Released qubit %d (traced out value %d)", qubit_id, int(outcome))
        self._after_mutation()

    def swap_qubit_ids(self, qubit_a: int, qubit_b: int) -> None:
        """
        Exchange the locations of two qubits without touching the state.

        This relabeling is equivalent to a SWAP gate between them.

        Raises:
            UsageError: If either id is not live.
        """
        self._map.swap_ids(qubit_a, qubit_b)

    # ------------------------------------------------------------------
    # Local gates
    # ------------------------------------------------------------------

    def x(self, target: int) -> None:
        self._apply_local(_X, (), target)

    def mcx(self, controls: Sequence[int], target: int) -> None:
        self._apply_local(_X, controls, target)

    def y(self, target: int) -> None:
        self._apply_local(_Y, (), target)

    def mcy(self, controls: Sequence[int], target: int) -> None:
        self._apply_local(_Y, controls, target)

    def z(self, target: int) -> None:
        self._apply_local(_Z, (), target)

    def mcz(self, controls: Sequence[int], target: int) -> None:
        self._apply_local(_Z, controls, target)

    def s(self, target: int) -> None:
        self._apply_local(_S, (), target)

    def mcs(self, controls: Sequence[int], target: int) -> None:
        self._apply_local(_S, controls, target)

    def s_adjoint(self, target: int) -> None:
        self._apply_local(_S_ADJ, (), target)

    def mcs_adjoint(self, controls: Sequence[int], target: int) -> None:
        self._apply_local(_S_ADJ, controls, target)

    def t(self, target: int) -> None:
        self._apply_local(_T, (), target)

    def mct(self, controls: Sequence[int], target: int) -> None:
        self._apply_local(_T, controls, target)

    def t_adjoint(self, target: int) -> None:
        self._apply_local(_T_ADJ, (), target)

    def mct_adjoint(self, controls: Sequence[int], target: int) -> None:
        self._apply_local(_T_ADJ, controls, target)

    def rz(self, theta: float, target: int) -> None:
        """Rz(θ) = diag(e^{-iθ/2}, e^{iθ/2})."""
        self._apply_local(rz_transform(theta), (), target)

    def mcrz(self, controls: Sequence[int], theta: float, target: int) -> None:
        self._apply_local(rz_transform(theta), controls, target)

    def phase(self, phase: complex, target: int) -> None:
        """Multiply the |1⟩ component of ``target`` by ``phase``."""
        self._apply_local(phase_transform(phase), (), target)

    def mcphase(self, controls: Sequence[int], phase: complex, target: int) -> None:
        self._apply_local(phase_transform(phase), controls, target)

    # ------------------------------------------------------------------
    # Cross-entry gates
    # ------------------------------------------------------------------

    def h(self, target: int) -> None:
        self.mch((), target)

    def mch(self, controls: Sequence[int], target: int) -> None:
        target_loc, control_locs = self._resolve(target, controls)
        apply_hadamard(self._state, target_loc, control_locs)
        self._after_mutation()

    def rx(self, theta: float, target: int) -> None:
        self.mcrx((), theta, target)

    def mcrx(self, controls: Sequence[int], theta: float, target: int) -> None:
        target_loc, control_locs = self._resolve(target, controls)
        apply_rotation(self._state, theta, target_loc, control_locs, sign_flip=False)
        self._after_mutation()

    def ry(self, theta: float, target: int) -> None:
        self.mcry((), theta, target)

    def mcry(self, controls: Sequence[int], theta: float, target: int) -> None:
        target_loc, control_locs = self._resolve(target, controls)
        apply_rotation(self._state, theta, target_loc, control_locs, sign_flip=True)
        self._after_mutation()

    # ------------------------------------------------------------------
    # Measurement
    # ------------------------------------------------------------------

    def joint_probability(self, qubit_ids: Sequence[int]) -> float:
        """
        Probability that measuring the parity of ``qubit_ids`` yields 1.

        Raises:
            UsageError: On duplicate or unknown ids.
        """
        locs = self._resolve_distinct(qubit_ids)
        return joint_probability(self._state, locs)

    def measure(self, qubit_id: int, generator: Optional[torch.Generator] = None) -> bool:
        """
        Measure one qubit in the computational basis and collapse the state.

        Raises:
            UsageError: If ``qubit_id`` is not live.
        """
        loc = self._map.location(qubit_id)
        outcome = measure_locations(
            self._state, [loc], generator if generator is not None else self._generator
        )
        logger.debug("Measured qubit %d -> %d", qubit_id, int(outcome))
        self._after_mutation()
        return outcome

    def joint_measure(
        self, qubit_ids: Sequence[int], generator: Optional[torch.Generator] = None
    ) -> bool:
        """
        Measure the parity of several qubits with a single sample and collapse.

        Raises:
            UsageError: On duplicate or unknown ids.
        """
        locs = self._resolve_distinct(qubit_ids)
        outcome = measure_locations(
            self._state, locs, generator if generator is not None else self._generator
        )
        logger.debug("Joint measurement of %s -> %d", list(qubit_ids), int(outcome))
        self._after_mutation()
        return outcome

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _order_by_id(self) -> None:
        for index, qubit_id in enumerate(self._map.sorted_ids()):
            loc = self._map.location(qubit_id)
            if loc != index:
                self._state.swap_qubit_state(loc, index)
                self._map.swap_locations(loc, index)

    def dump(self, file: Optional[TextIO] = None, print_id_map: bool = False) -> None:
        """
        Print every stored basis entry as ``|index⟩: amplitude``.

        Locations are first permuted so that bit ``k`` of each index belongs
        to the qubit with the ``k``-th smallest id; this relabeling persists.
        Entries are printed in ascending index order.

        Args:
            file: Output stream. Defaults to sys.stdout.
            print_id_map: Also print the ``{id: location}`` map.
        """
        if file is None:
            file = sys.stdout
        self._order_by_id()
        if print_id_map:
            print(f"MAP: {self._map.as_dict()}", file=file)
        for index, value in self._state.sorted_items():
            print(f"|{index}⟩: {value}", file=file)

    def state_vector(self, dtype: Optional[torch.dtype] = None) -> torch.Tensor:
        """
        Expand the state into a dense tensor of shape ``(2**n,)``.

        Bit ``k`` of the dense index belongs to the qubit with the ``k``-th
        smallest id. Unlike :meth:`dump` this does not relabel anything.

        Args:
            dtype: Complex dtype. Defaults to torch.complex128.

        Raises:
            ValueError: If more than ``config.max_dense_qubits`` qubits are
                allocated.
        """
        if dtype is None:
            dtype = torch.complex128

        n_qubits = len(self._map)
        if n_qubits > self.config.max_dense_qubits:
            raise ValueError(
                f"Refusing to build a dense vector for {n_qubits} qubits "
                f"(max_dense_qubits={self.config.max_dense_qubits})."
            )
        if n_qubits == 0:
            return torch.ones(1, dtype=dtype)

        order = [self._map.location(qid) for qid in self._map.sorted_ids()]
        indices = []
        values = []
        for index, value in self._state.items():
            dense_index = 0
            for k, loc in enumerate(order):
                dense_index |= ((index >> loc) & 1) << k
            indices.append(dense_index)
            values.append(value)

        vec = torch.zeros(2**n_qubits, dtype=dtype)
        vec[torch.tensor(indices, dtype=torch.int64)] = torch.tensor(values, dtype=dtype)
        return vec


__all__ = ["SparseSimulator"]
