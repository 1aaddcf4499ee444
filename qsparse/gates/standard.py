"""Dense 2×2 matrices for the gates supported by the sparse engines.

The sparse engines never build these matrices. They are written out from
their textbook definitions and serve as the reference the sparse transforms
are checked against, and for evolving :meth:`SparseSimulator.state_vector`
output densely.
"""

from __future__ import annotations

import cmath
import math
from typing import Sequence

import torch

from .local import LocalTransform


def _resolve(dtype: torch.dtype | None, device: torch.device | None):
    if dtype is None:
        dtype = torch.complex128
    if device is None:
        device = torch.device("cpu")
    return dtype, device


def _matrix(
    rows: Sequence[Sequence[complex]],
    dtype: torch.dtype | None,
    device: torch.device | None,
) -> torch.Tensor:
    dtype, device = _resolve(dtype, device)
    return torch.tensor(rows, dtype=dtype, device=device)


def I(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Identity gate.

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex128.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor.
    """
    dtype, device = _resolve(dtype, device)
    return torch.eye(2, dtype=dtype, device=device)


def X(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-X gate (bit flip)."""
    return _matrix([[0.0, 1.0], [1.0, 0.0]], dtype, device)


def Y(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Y gate."""
    return _matrix([[0.0, -1.0j], [1.0j, 0.0]], dtype, device)


def Z(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Pauli-Z gate (phase flip)."""
    return _matrix([[1.0, 0.0], [0.0, -1.0]], dtype, device)


def H(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Hadamard gate."""
    inv_sqrt2 = 1.0 / math.sqrt(2.0)
    return _matrix([[inv_sqrt2, inv_sqrt2], [inv_sqrt2, -inv_sqrt2]], dtype, device)


def S(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """S gate (√Z)."""
    return _matrix([[1.0, 0.0], [0.0, 1.0j]], dtype, device)


def S_ADJ(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Adjoint of the S gate."""
    return _matrix([[1.0, 0.0], [0.0, -1.0j]], dtype, device)


def T(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """T gate (√S)."""
    return _matrix([[1.0, 0.0], [0.0, cmath.exp(1.0j * math.pi / 4.0)]], dtype, device)


def T_ADJ(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """Adjoint of the T gate."""
    return _matrix([[1.0, 0.0], [0.0, cmath.exp(-1.0j * math.pi / 4.0)]], dtype, device)


def PHASE(
    phase: complex,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """Generalized phase gate diag(1, phase)."""
    return _matrix([[1.0, 0.0], [0.0, complex(phase)]], dtype, device)


def RX(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Rotation around the X axis: RX(θ) = exp(-iθX/2).

    Matrix form:
        [[cos(θ/2), -i sin(θ/2)],
         [-i sin(θ/2), cos(θ/2)]]
    """
    c = math.cos(float(theta) / 2.0)
    s = math.sin(float(theta) / 2.0)
    return _matrix([[c, -1.0j * s], [-1.0j * s, c]], dtype, device)


def RY(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Rotation around the Y axis: RY(θ) = exp(-iθY/2).

    Matrix form:
        [[cos(θ/2), -sin(θ/2)],
         [sin(θ/2), cos(θ/2)]]
    """
    c = math.cos(float(theta) / 2.0)
    s = math.sin(float(theta) / 2.0)
    return _matrix([[c, -s], [s, c]], dtype, device)


def RZ(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Rotation around the Z axis: RZ(θ) = exp(-iθZ/2).

    Matrix form:
        [[exp(-iθ/2), 0],
         [0, exp(iθ/2)]]
    """
    half = float(theta) / 2.0
    return _matrix(
        [[cmath.exp(-1.0j * half), 0.0], [0.0, cmath.exp(1.0j * half)]], dtype, device
    )


def local_transform_matrix(
    transform: LocalTransform,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Dense matrix equivalent of a :class:`LocalTransform`.

    Column ``b`` holds the image of basis state |b⟩: the output row is the
    (possibly flipped) bit and the entry is the factor chosen for it.
    """
    rows = [[0j, 0j], [0j, 0j]]
    for source in (0, 1):
        out = source ^ 1 if transform.flip else source
        rows[out][source] = transform.one_factor if out else transform.zero_factor
    return _matrix(rows, dtype, device)


def is_unitary(matrix: torch.Tensor, atol: float = 1e-10) -> bool:
    """
    Check if a matrix is unitary within a given tolerance.

    Args:
        matrix: Tensor of shape (..., n, n).
        atol: Absolute tolerance for the check.

    Returns:
        True if U†U = I within tolerance.
    """
    if matrix.shape[-1] != matrix.shape[-2]:
        return False

    adjoint = matrix.conj().transpose(-1, -2)
    product = torch.matmul(adjoint, matrix)

    n = matrix.shape[-1]
    identity = torch.eye(n, dtype=matrix.dtype, device=matrix.device)
    if product.ndim > 2:
        identity = identity.expand(product.shape)

    diff = torch.abs(product - identity)
    return bool(torch.all(diff < atol).item())


__all__ = [
    "I",
    "X",
    "Y",
    "Z",
    "H",
    "S",
    "S_ADJ",
    "T",
    "T_ADJ",
    "PHASE",
    "RX",
    "RY",
    "RZ",
    "local_transform_matrix",
    "is_unitary",
]
