"""
Pytest configuration and shared fixtures for numgrid tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from numgrid import Matrix, Vector, config  # noqa: E402


DATA_DIR = Path(__file__).parent / "data"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the default configuration."""
    config.reset()
    yield
    config.reset()
    for callbacks in config._callbacks.values():
        callbacks.clear()


@pytest.fixture
def data_dir():
    """Directory holding the CSV test files."""
    return DATA_DIR


@pytest.fixture
def small_vector():
    """Vector [3, 1, 4, 1, 5] (int64)."""
    return Vector([3, 1, 4, 1, 5])


@pytest.fixture
def small_matrix():
    """3x3 matrix.

    [[1, 2, 3],
     [4, 5, 6],
     [7, 8, 9]]
    """
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def wide_matrix():
    """3x4 matrix with element (i, j) = 10 * i + j."""
    return Matrix([[10 * i + j for j in range(4)] for i in range(3)])


class FixedSampler:
    """Deterministic sampler returning a counting sequence."""

    def __init__(self):
        self.calls = []

    def uniform(self, size, low, high, dtype):
        self.calls.append(("uniform", size, low, high, dtype))
        return [low + (k % (high - low)) for k in range(size)]

    def normal(self, size, mean, std_dev, dtype):
        self.calls.append(("normal", size, mean, std_dev, dtype))
        return [float(mean)] * size


@pytest.fixture
def fixed_sampler():
    return FixedSampler()
