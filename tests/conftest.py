"""Shared fixtures for the rowops test suite."""

import random
import numpy as np
import pytest

from rowops.matrix import Matrix


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "perf: performance sanity checks (deselect with -m 'not perf')",
    )


@pytest.fixture
def seeded_rng(request: pytest.FixtureRequest) -> int:
    """Seed both stdlib random and numpy RNG.

    The seed is extracted from ``request.param`` when used with
    indirect parametrization, or defaults to 42.
    """
    seed = getattr(request, "param", 42)
    random.seed(seed)
    np.random.seed(seed)
    return seed


@pytest.fixture
def matrix_3x3() -> Matrix:
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
