"""Tests that the shipped examples behave as documented."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "examples"))

from bstreelib import TreeConfig
import recursive_vs_iterative


def test_small_sorted_build_works_in_both_modes():
    for config in (TreeConfig.recursive(), TreeConfig.iterative()):
        height, _ = recursive_vs_iterative.build_sorted(config, 100)
        assert height == 100


def test_iterative_survives_deep_chain():
    size = sys.getrecursionlimit() * 2
    height, _ = recursive_vs_iterative.build_sorted(TreeConfig.iterative(), size)
    assert height == size


def test_recursive_hits_limit_on_deep_chain():
    size = sys.getrecursionlimit() * 2
    height, _ = recursive_vs_iterative.build_sorted(TreeConfig.recursive(), size)
    assert height is None
