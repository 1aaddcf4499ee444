"""Teleportation example: moving a qubit state with two classical bits.

The message qubit is prepared with an Ry rotation, teleported onto a fresh
qubit using a Bell pair, two measurements and classically controlled X/Z
corrections, and the receiver's statistics are compared with the original
preparation.
"""

from __future__ import annotations

import math

import torch

import qsparse as qs


def teleport(sim: qs.SparseSimulator, theta: float) -> int:
    """Teleport Ry(theta)|0⟩ and return the receiving qubit's id."""
    message = sim.allocate()
    sender = sim.allocate()
    receiver = sim.allocate()

    sim.ry(theta, message)

    # Shared Bell pair
    sim.h(sender)
    sim.mcx([sender], receiver)

    # Bell-basis measurement of message and sender
    sim.mcx([message], sender)
    sim.h(message)
    m1 = sim.measure(message)
    m2 = sim.measure(sender)

    if m2:
        sim.x(receiver)
    if m1:
        sim.z(receiver)

    sim.release(message)
    sim.release(sender)
    return receiver


def main() -> None:
    """Teleport a handful of states and check the receiver's probabilities."""
    generator = torch.Generator().manual_seed(2024)
    sim = qs.SparseSimulator(generator=generator)

    worst = 0.0
    for theta in (0.3, 1.1, math.pi / 2.0, 2.4):
        receiver = teleport(sim, theta)
        expected = math.sin(theta / 2.0) ** 2
        observed = sim.joint_probability([receiver])
        worst = max(worst, abs(observed - expected))
        print(f"theta={theta:.3f}: P(1) expected {expected:.6f}, observed {observed:.6f}")
        sim.release(receiver)

    print(f"Max deviation: {worst:.2e}")
    print("Teleportation succeeded" if worst < 1e-9 else "Teleportation FAILED")


if __name__ == "__main__":
    main()
