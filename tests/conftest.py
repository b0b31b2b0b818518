"""Shared pytest configuration for BSTreeLib tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import BinarySearchTree, TreeConfig


# Insertion order used by the demonstration entry point
DEMO_KEYS = [76, 33, 80, 10, 20, 50, 12]


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: long-running tests excluded by run_tests.py by default"
    )


@pytest.fixture(params=["recursive", "iterative"])
def demo_tree(request):
    """Tree holding DEMO_KEYS, built once per execution mode."""
    config = TreeConfig.recursive() if request.param == "recursive" else TreeConfig.iterative()
    tree = BinarySearchTree(config)
    tree.insert_all(DEMO_KEYS)
    yield tree
    tree.teardown()
