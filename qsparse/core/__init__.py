"""Core value types: basis indices, amplitudes and configuration."""

from .basis import (
    flip_bit,
    get_bit,
    is_nearly_zero,
    location_mask,
    norm_sqr,
    parity,
)
from .config import DEFAULT_CONFIG, SimulatorConfig

__all__ = [
    "get_bit",
    "flip_bit",
    "location_mask",
    "parity",
    "norm_sqr",
    "is_nearly_zero",
    "SimulatorConfig",
    "DEFAULT_CONFIG",
]
