"""Pytest configuration and shared fixtures for qsparse tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- A seeded simulator fixture
- Debug mode switched on for the whole session so every operation
  re-checks the sparse-state invariants
"""

import os
from typing import Iterator

import numpy as np
import pytest
import torch

from qsparse import SparseSimulator
from qsparse.diagnostics import debug_context


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic torch RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    generator = torch.Generator()
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function")
def sim(torch_rng: torch.Generator) -> SparseSimulator:
    """A fresh simulator whose measurements draw from ``torch_rng``."""
    return SparseSimulator(generator=torch_rng)


@pytest.fixture(scope="function", autouse=True)
def invariant_checks() -> Iterator[None]:
    """Run every test with debug mode (invariant checking) enabled."""
    with debug_context(True):
        yield


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed torch's global generator for code paths that fall back to it."""
    torch.manual_seed(_seed())
