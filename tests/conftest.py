"""Shared pytest configuration for the BinTreeLib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib.testing import build_tree_from_levels, sample_tree


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: large-tree tests excluded from the default run"
    )


@pytest.fixture
def abcd_tree():
    """The four-node reference tree (A with B, C; B with D)."""
    return sample_tree()


@pytest.fixture
def full_tree():
    """Complete tree of seven nodes holding 1..7 in level order."""
    return build_tree_from_levels([1, 2, 3, 4, 5, 6, 7])
