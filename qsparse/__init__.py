"""qsparse - a sparse state quantum simulator backend."""

__version__ = "0.1.0"

# Core value helpers and configuration
from .core import DEFAULT_CONFIG, SimulatorConfig

# Storage and bookkeeping
from .backend import QubitMap, SparseState

# Diagnostics
from .diagnostics import (
    assert_bit_constant,
    assert_invariants,
    assert_no_stray_bits,
    assert_normalized,
    assert_pruned,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    state_norm,
)

# Errors
from .errors import UsageError

# Gate engines
from .gates import (
    LocalTransform,
    apply_hadamard,
    apply_local,
    apply_pair_transform,
    apply_rotation,
    rotation_coefficients,
)

# Measurement
from .measurement import collapse, draw_sample, joint_probability, measure_locations

# Simulator
from .simulator import SparseSimulator

__all__ = [
    # Version
    "__version__",
    # Simulator
    "SparseSimulator",
    # Config
    "SimulatorConfig",
    "DEFAULT_CONFIG",
    # Errors
    "UsageError",
    # Backend
    "SparseState",
    "QubitMap",
    # Gates
    "LocalTransform",
    "apply_local",
    "apply_pair_transform",
    "apply_hadamard",
    "apply_rotation",
    "rotation_coefficients",
    # Measurement
    "joint_probability",
    "collapse",
    "draw_sample",
    "measure_locations",
    # Diagnostics
    "state_norm",
    "assert_normalized",
    "assert_pruned",
    "assert_no_stray_bits",
    "assert_bit_constant",
    "assert_invariants",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
