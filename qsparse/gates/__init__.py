"""Gate engines and dense reference matrices."""

from .cross import (
    HADAMARD_COEFFICIENTS,
    apply_hadamard,
    apply_pair_transform,
    apply_rotation,
    rotation_coefficients,
)
from .local import (
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

__all__ = [
    "LocalTransform",
    "apply_local",
    "x_transform",
    "y_transform",
    "z_transform",
    "s_transform",
    "s_adjoint_transform",
    "t_transform",
    "t_adjoint_transform",
    "rz_transform",
    "phase_transform",
    "HADAMARD_COEFFICIENTS",
    "rotation_coefficients",
    "apply_pair_transform",
    "apply_hadamard",
    "apply_rotation",
]
