"""Exception types raised by qsparse."""

from __future__ import annotations


class UsageError(ValueError):
    """
    Raised when a caller violates the simulator's qubit identifier contract.

    This covers references to identifiers that are not currently allocated
    and operand lists (controls plus target, or the qubits of a joint
    measurement) that name the same qubit twice. The operation is aborted
    before the state is modified.
    """


def unknown_qubit(qubit_id: int) -> UsageError:
    return UsageError(f"Unable to find qubit with id {qubit_id}.")


def duplicate_qubit(qubit_id: int) -> UsageError:
    return UsageError(f"Duplicate qubit id '{qubit_id}' found in application.")
