#!/usr/bin/env python3
"""
Demonstration of BSTreeLib.

This example demonstrates:
- Building a tree from a fixed key sequence
- The three traversal orders
- Searching for a present and an absent key
- Tearing the tree down

Usage:
    python -m bstreelib
"""

import logging
import sys

from .api import format_keys
from .errors import BSTError
from .tree import BinarySearchTree

logger = logging.getLogger(__name__)

# Inserting in this order produces:
#         76
#        /  \
#      33    80
#     /  \
#   10    50
#     \
#      20
#     /
#   12
DEMO_KEYS = [76, 33, 80, 10, 20, 50, 12]
DEMO_SEARCHES = [10, 25]


def run_demo(tree: BinarySearchTree) -> None:
    """Fill the tree, print traversals and search results."""
    tree.insert_all(DEMO_KEYS)

    # The label says ascending but the walk is right-node-left (descending)
    print(f"Inorder (ascending order): {format_keys(tree.inorder())}")
    print(f"Preorder: {format_keys(tree.preorder())}")
    print(f"Postorder: {format_keys(tree.postorder())}")

    for key in DEMO_SEARCHES:
        if tree.search(key) is not None:
            print(f"Key {key} found in the tree.")
        else:
            print(f"Key {key} NOT found in the tree.")


def main() -> int:
    """Run the demonstration.

    Returns:
        Process exit status (0 on success, 1 if a node could not be created)
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    tree = BinarySearchTree()
    try:
        run_demo(tree)
    except BSTError as e:
        logger.debug("Demo aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        released = tree.teardown()
        logger.debug("Released %d nodes", released)

    return 0


if __name__ == "__main__":
    sys.exit(main())
