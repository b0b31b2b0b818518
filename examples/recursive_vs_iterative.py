#!/usr/bin/env python3
"""
Comparison between recursive and iterative operations on degenerate trees.

This example demonstrates:
- How sorted input produces a chain whose height equals its size
- Recursive operations failing once the chain outgrows the recursion limit
- Iterative operations handling the same chain

Usage:
    python examples/recursive_vs_iterative.py [size]
"""

import sys
import time
from pathlib import Path
from typing import Optional, Tuple

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import BinarySearchTree, TreeConfig


def build_sorted(config: TreeConfig, size: int) -> Tuple[Optional[int], float]:
    """Insert 0..size-1 in order and return (height, seconds).

    Height is None if the build hit the recursion limit.
    """
    start_time = time.perf_counter()
    tree = BinarySearchTree(config)
    try:
        tree.insert_all(range(size))
    except RecursionError:
        # A recursive teardown would overflow too; drop the handle instead
        return None, time.perf_counter() - start_time

    height = tree.height()
    tree.teardown()
    elapsed = time.perf_counter() - start_time
    return height, elapsed


def main():
    size = int(sys.argv[1]) if len(sys.argv) > 1 else sys.getrecursionlimit() * 2

    print(f"Inserting {size:,} sorted keys (recursion limit {sys.getrecursionlimit():,})")
    print("-" * 50)

    for name, config in (("recursive", TreeConfig.recursive()),
                         ("iterative", TreeConfig.iterative())):
        height, elapsed = build_sorted(config, size)
        if height is None:
            print(f"  {name:>9}: hit the recursion limit after {elapsed:.2f}s")
        else:
            print(f"  {name:>9}: height {height:,} in {elapsed:.2f}s")


if __name__ == "__main__":
    main()
