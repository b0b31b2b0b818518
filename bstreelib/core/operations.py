"""Stateless tree operations for BSTreeLib.

Every function here takes the root of a (sub)tree, which may be None for
an empty tree. Functions that can change the root return the root the
caller should store.

Each operation comes in two flavours: the recursive one follows the
textbook definition, the ``*_iterative`` one walks with a loop or an
explicit stack and produces identical results on trees of any height.
"""

import logging
from typing import List, Optional, Tuple

from .node import Node
from ..errors import NodeAllocationError

logger = logging.getLogger(__name__)


def create_node(key: int) -> Node:
    """Allocate a new node with no children.

    Args:
        key: Integer key for the node

    Returns:
        The new Node

    Raises:
        TypeError: If key is not an int
        NodeAllocationError: If the interpreter cannot allocate the node
    """
    # bool is an int subclass but not a meaningful key
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError(f"BST keys must be integers, got {type(key).__name__}")

    try:
        return Node(key)
    except MemoryError as e:
        logger.error("Unable to allocate node for key %s", key)
        raise NodeAllocationError(key) from e


def insert(root: Optional[Node], key: int) -> Node:
    """Insert key into the subtree rooted at root.

    Keys smaller than a node's key go left; everything else, including
    equal keys, goes right. No rebalancing is performed.

    Args:
        root: Root of the subtree, or None for an empty subtree
        key: Key to insert

    Returns:
        The new node if root was None, otherwise root itself
    """
    if root is None:
        return create_node(key)

    if key < root.key:
        root.left = insert(root.left, key)
    else:
        root.right = insert(root.right, key)

    return root


def insert_iterative(root: Optional[Node], key: int) -> Node:
    """Loop-based version of insert with the same tie-break rule."""
    node = create_node(key)
    if root is None:
        return node

    current = root
    while True:
        if key < current.key:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def search(root: Optional[Node], key: int) -> Optional[Node]:
    """Find a node holding key.

    Args:
        root: Root of the subtree to search
        key: Key to look for

    Returns:
        The first node on the descent path whose key equals key, or None
    """
    if root is None:
        return None
    if key == root.key:
        return root
    if key < root.key:
        return search(root.left, key)
    return search(root.right, key)


def search_iterative(root: Optional[Node], key: int) -> Optional[Node]:
    """Loop-based version of search."""
    current = root
    while current is not None:
        if key == current.key:
            return current
        current = current.left if key < current.key else current.right
    return None


def teardown(root: Optional[Node]) -> int:
    """Release every node of the subtree, children before their owner.

    Each node's child links are cleared after both of its subtrees have
    been released, so no subtree is reached through an already released
    ancestor. The caller must drop its own reference to root afterwards.

    Args:
        root: Root of the subtree to release

    Returns:
        Number of nodes released
    """
    if root is None:
        return 0

    released = teardown(root.left)
    released += teardown(root.right)
    root.left = None
    root.right = None
    return released + 1


def teardown_iterative(root: Optional[Node]) -> int:
    """Explicit-stack version of teardown, same postorder release order."""
    if root is None:
        return 0

    released = 0
    # Stack holds (node, children_pushed)
    stack: List[Tuple[Node, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            node.left = None
            node.right = None
            released += 1
            continue

        stack.append((node, True))
        # Right pushed first so the left subtree is released first
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))

    return released
