"""Benchmark gate application on sparse states."""

import time
from typing import Dict

import qsparse as qs


def benchmark_local_gates(n_qubits: int, n_gates: int = 10000) -> Dict[str, float]:
    """Benchmark the local engine on a GHZ state of ``n_qubits``.

    Args:
        n_qubits: Number of qubits.
        n_gates: Number of gates to apply.

    Returns:
        Dictionary with timing results.
    """
    sim = qs.SparseSimulator(seed=0)
    qubits = [sim.allocate() for _ in range(n_qubits)]
    sim.h(qubits[0])
    for q in qubits[1:]:
        sim.mcx([qubits[0]], q)

    ops = [sim.x, sim.y, sim.z, sim.s, sim.t]

    # Warmup
    for _ in range(10):
        sim.x(qubits[0])

    start = time.perf_counter()
    for i in range(n_gates):
        ops[i % len(ops)](qubits[i % n_qubits])
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_qubits": n_qubits,
        "n_gates": n_gates,
        "entries": len(sim.state),
        "total_time_sec": total_time,
        "time_per_gate_sec": total_time / n_gates,
        "gates_per_sec": n_gates / total_time,
    }


def benchmark_hadamard_layer(n_qubits: int, n_layers: int = 4) -> Dict[str, float]:
    """Benchmark the cross-entry engine as the state fills up.

    Args:
        n_qubits: Number of qubits.
        n_layers: Number of full Hadamard layers to apply.

    Returns:
        Dictionary with timing results.
    """
    sim = qs.SparseSimulator(seed=0)
    qubits = [sim.allocate() for _ in range(n_qubits)]

    start = time.perf_counter()
    for _ in range(n_layers):
        for q in qubits:
            sim.h(q)
        for a, b in zip(qubits, qubits[1:]):
            sim.mcz([a], b)
    end = time.perf_counter()

    n_gates = n_layers * (2 * n_qubits - 1)
    total_time = end - start
    return {
        "n_qubits": n_qubits,
        "n_gates": n_gates,
        "entries": len(sim.state),
        "total_time_sec": total_time,
        "time_per_gate_sec": total_time / n_gates,
        "gates_per_sec": n_gates / total_time,
    }


if __name__ == "__main__":
    print("Benchmarking gate application...")

    results = benchmark_local_gates(n_qubits=1000, n_gates=10000)
    print(f"Local gates on GHZ ({results['n_qubits']} qubits, {results['entries']} entries):")
    print(f"  Time per gate: {results['time_per_gate_sec']*1e6:.2f} μs")
    print(f"  Gates per second: {results['gates_per_sec']:.0f}")

    results_h = benchmark_hadamard_layer(n_qubits=12, n_layers=4)
    print(f"\nHadamard layers ({results_h['n_qubits']} qubits, {results_h['entries']} entries):")
    print(f"  Time per gate: {results_h['time_per_gate_sec']*1e3:.2f} ms")
    print(f"  Gates per second: {results_h['gates_per_sec']:.0f}")
