"""Gate/inverse checks using an entangled witness qubit.

A control qubit is put in superposition and copied onto each target with
CNOT. The operation and its claimed inverse run on the targets; undoing the
copy and the Hadamard must return the control to |0⟩ and leave a single
basis entry. Any mismatch between the pair leaves the witness entangled.
"""

import cmath
import math
from typing import Callable, List

import pytest

from qsparse import SparseSimulator

Op = Callable[[SparseSimulator, List[int]], None]


def assert_operation_equal_referenced(op: Op, reference: Op, count: int) -> None:
    sim = SparseSimulator(seed=0)

    ctl = sim.allocate()
    sim.h(ctl)

    qs = []
    for _ in range(count):
        q = sim.allocate()
        sim.mcx([ctl], q)
        qs.append(q)

    op(sim, qs)
    reference(sim, qs)

    for q in qs:
        sim.mcx([ctl], q)
    sim.h(ctl)

    assert sim.joint_probability([ctl]) == pytest.approx(0.0, abs=1e-10)
    assert len(sim.state) == 1


_ANGLE = math.pi / 7.0

CASES = {
    "h": (lambda s, q: s.h(q[0]), lambda s, q: s.h(q[0]), 1),
    "x": (lambda s, q: s.x(q[0]), lambda s, q: s.x(q[0]), 1),
    "y": (lambda s, q: s.y(q[0]), lambda s, q: s.y(q[0]), 1),
    "z": (lambda s, q: s.z(q[0]), lambda s, q: s.z(q[0]), 1),
    "s": (lambda s, q: s.s(q[0]), lambda s, q: s.s_adjoint(q[0]), 1),
    "s_adjoint": (lambda s, q: s.s_adjoint(q[0]), lambda s, q: s.s(q[0]), 1),
    "t": (lambda s, q: s.t(q[0]), lambda s, q: s.t_adjoint(q[0]), 1),
    "t_adjoint": (lambda s, q: s.t_adjoint(q[0]), lambda s, q: s.t(q[0]), 1),
    "cx": (lambda s, q: s.mcx([q[0]], q[1]), lambda s, q: s.mcx([q[0]], q[1]), 2),
    "cy": (lambda s, q: s.mcy([q[0]], q[1]), lambda s, q: s.mcy([q[0]], q[1]), 2),
    "cz": (lambda s, q: s.mcz([q[0]], q[1]), lambda s, q: s.mcz([q[0]], q[1]), 2),
    "cs": (
        lambda s, q: s.mcs([q[0]], q[1]),
        lambda s, q: s.mcs_adjoint([q[0]], q[1]),
        2,
    ),
    "ct": (
        lambda s, q: s.mct([q[0]], q[1]),
        lambda s, q: s.mct_adjoint([q[0]], q[1]),
        2,
    ),
    "ch": (lambda s, q: s.mch([q[0]], q[1]), lambda s, q: s.mch([q[0]], q[1]), 2),
    "ccx": (
        lambda s, q: s.mcx([q[0], q[1]], q[2]),
        lambda s, q: s.mcx([q[1], q[0]], q[2]),
        3,
    ),
    "swap": (
        lambda s, q: s.swap_qubit_ids(q[0], q[1]),
        lambda s, q: s.swap_qubit_ids(q[0], q[1]),
        2,
    ),
    "rz": (lambda s, q: s.rz(_ANGLE, q[0]), lambda s, q: s.rz(-_ANGLE, q[0]), 1),
    "rx": (lambda s, q: s.rx(_ANGLE, q[0]), lambda s, q: s.rx(-_ANGLE, q[0]), 1),
    "ry": (lambda s, q: s.ry(_ANGLE, q[0]), lambda s, q: s.ry(-_ANGLE, q[0]), 1),
    "crz": (
        lambda s, q: s.mcrz([q[0]], _ANGLE, q[1]),
        lambda s, q: s.mcrz([q[0]], -_ANGLE, q[1]),
        2,
    ),
    "crx": (
        lambda s, q: s.mcrx([q[0]], _ANGLE, q[1]),
        lambda s, q: s.mcrx([q[0]], -_ANGLE, q[1]),
        2,
    ),
    "cry": (
        lambda s, q: s.mcry([q[0]], _ANGLE, q[1]),
        lambda s, q: s.mcry([q[0]], -_ANGLE, q[1]),
        2,
    ),
    "mcphase": (
        lambda s, q: s.mcphase(q[2:3], cmath.exp(-0.5j * _ANGLE), q[1]),
        lambda s, q: s.mcphase(q[2:3], cmath.exp(0.5j * _ANGLE), q[1]),
        3,
    ),
    "phase": (
        lambda s, q: s.phase(cmath.exp(1.1j), q[0]),
        lambda s, q: s.phase(cmath.exp(-1.1j), q[0]),
        1,
    ),
}


@pytest.mark.parametrize("name", sorted(CASES))
def test_operation_matches_inverse(name: str) -> None:
    op, reference, count = CASES[name]
    assert_operation_equal_referenced(op, reference, count)


def test_witness_detects_mismatch() -> None:
    """A pair that is not mutually inverse leaves the witness entangled."""
    with pytest.raises(AssertionError):
        assert_operation_equal_referenced(
            lambda s, q: s.s(q[0]),
            lambda s, q: s.s(q[0]),
            1,
        )
