"""GHZ example: entangling a long chain of qubits with a sparse state.

A dense simulator would need 2**n amplitudes for this register. The sparse
state only ever holds the two populated basis states |0...0⟩ and |1...1⟩.
"""

from __future__ import annotations

import logging
import sys

import qsparse as qs
from qsparse.logging import configure_logging


def main() -> None:
    """Build a GHZ state, measure one qubit and release the register."""
    configure_logging(level=logging.INFO)

    n_qubits = 200
    sim = qs.SparseSimulator(seed=1)

    ctl = sim.allocate()
    sim.h(ctl)
    qubits = [ctl]
    for _ in range(n_qubits - 1):
        q = sim.allocate()
        sim.mcx([ctl], q)
        qubits.append(q)

    print(f"Allocated {sim.num_qubits} qubits")
    print(f"Stored basis entries: {len(sim.state)}")
    print(f"P(parity of all qubits is odd) = {sim.joint_probability(qubits):.3f}")
    print(f"P(last qubit is 1) = {sim.joint_probability([qubits[-1]]):.3f}")

    outcome = sim.measure(qubits[n_qubits // 2])
    print(f"Measured qubit {n_qubits // 2}: {int(outcome)}")
    print(f"Stored basis entries after measurement: {len(sim.state)}")

    agree = all(
        sim.joint_probability([q]) == (1.0 if outcome else 0.0) for q in qubits
    )
    print(f"All qubits agree with the outcome: {agree}")

    for q in qubits:
        sim.release(q)
    print(f"Qubits left after release: {sim.num_qubits}")

    if not agree:
        sys.exit(1)


if __name__ == "__main__":
    main()
