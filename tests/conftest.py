"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add the repository root to the path so the package imports without installing
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from prime_field.sampling import random_elements  # noqa: E402

N_OPERATIONS = 1_000


@pytest.fixture
def rng() -> np.random.Generator:
    """Deterministic generator so failures reproduce."""
    return np.random.default_rng(0x60D1_0C5)


@pytest.fixture
def operands(rng: np.random.Generator) -> list:
    """N_OPERATIONS + 1 random canonical elements."""
    return random_elements(N_OPERATIONS, rng)
