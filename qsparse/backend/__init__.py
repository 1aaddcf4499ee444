"""Sparse state storage and qubit bookkeeping."""

from .qubit_map import QubitMap
from .sparse_state import SparseState

__all__ = [
    "SparseState",
    "QubitMap",
]
