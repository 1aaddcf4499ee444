"""Measurement, sampling and collapse."""

from .collapse import collapse, draw_sample, joint_probability, measure_locations

__all__ = [
    "joint_probability",
    "collapse",
    "draw_sample",
    "measure_locations",
]
