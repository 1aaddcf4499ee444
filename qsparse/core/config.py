"""Numerical configuration for the sparse simulator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulatorConfig:
    """
    Numerical tolerances used by a :class:`~qsparse.simulator.SparseSimulator`.

    Args:
        near_zero_epsilon: Squared-magnitude threshold below which an
            amplitude is pruned from the sparse state. The default of 1e-20
            corresponds to a magnitude of 1e-10. Also decides when a rotation
            coefficient counts as zero.
        norm_atol: Absolute tolerance on the total probability used by the
            invariant checks.
        max_dense_qubits: Largest register :meth:`state_vector` will expand
            into a dense tensor.
    """

    near_zero_epsilon: float = 1e-20
    norm_atol: float = 1e-10
    max_dense_qubits: int = 20

    def __post_init__(self) -> None:
        if not self.near_zero_epsilon > 0.0:
            raise ValueError(
                f"near_zero_epsilon must be positive, got {self.near_zero_epsilon}"
            )
        if not self.norm_atol > 0.0:
            raise ValueError(f"norm_atol must be positive, got {self.norm_atol}")
        if self.max_dense_qubits < 0:
            raise ValueError(
                f"max_dense_qubits must be >= 0, got {self.max_dense_qubits}"
            )


DEFAULT_CONFIG = SimulatorConfig()
