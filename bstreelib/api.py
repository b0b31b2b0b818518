"""High-level API for BSTreeLib.

This module provides simple, functional interfaces over a root node.
These functions wrap the traversers and collectors for ease of use in
simple cases; ``root`` may always be None for an empty tree.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .config import ExecutionMode, TraversalOrder
from .core.collector import DataCollector, DepthCollector, KeyCollector
from .core.node import Node
from .core.traverser import create_traverser


def traverse_keys(
    root: Optional[Node],
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    mode: ExecutionMode = ExecutionMode.RECURSIVE,
) -> Iterator[int]:
    """Yield the keys of a tree in the given order.

    Args:
        root: Root of the tree
        order: Traversal order (enum or name such as "preorder")
        mode: Recursive or iterative walk

    Yields:
        Keys in traversal order

    Example:
        >>> root = None
        >>> for key in (2, 1, 3):
        ...     root = insert(root, key)
        >>> list(traverse_keys(root, "inorder"))
        [3, 2, 1]
    """
    for _, key in collect_tree_data(root, order, KeyCollector(), mode):
        yield key


def collect_tree_data(
    root: Optional[Node],
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    collector: Optional[DataCollector] = None,
    mode: ExecutionMode = ExecutionMode.RECURSIVE,
) -> Iterator[Tuple[Node, Any]]:
    """Traverse tree and collect data from each node.

    Args:
        root: Root of the tree
        order: Traversal order
        collector: What to collect per node (defaults to keys)
        mode: Recursive or iterative walk

    Yields:
        Tuples of (node, collected_data)
    """
    collector = collector or KeyCollector()
    traverser = create_traverser(order, mode)
    for node, depth in traverser.traverse(root):
        yield (node, collector.collect(node, depth))


def inorder(root: Optional[Node],
            mode: ExecutionMode = ExecutionMode.RECURSIVE) -> Iterator[int]:
    """Yield keys right subtree first, then node, then left subtree.

    The result is in descending order.
    """
    return traverse_keys(root, TraversalOrder.INORDER, mode)


def preorder(root: Optional[Node],
             mode: ExecutionMode = ExecutionMode.RECURSIVE) -> Iterator[int]:
    """Yield keys node first, then left subtree, then right subtree."""
    return traverse_keys(root, TraversalOrder.PREORDER, mode)


def postorder(root: Optional[Node],
              mode: ExecutionMode = ExecutionMode.RECURSIVE) -> Iterator[int]:
    """Yield keys left subtree first, then right subtree, then node."""
    return traverse_keys(root, TraversalOrder.POSTORDER, mode)


def format_keys(keys: Iterable[int]) -> str:
    """Join keys into a single space-separated line."""
    return " ".join(str(key) for key in keys)


def count_nodes(root: Optional[Node],
                mode: ExecutionMode = ExecutionMode.RECURSIVE) -> int:
    """Count the nodes in a tree."""
    count = 0
    for _ in create_traverser(TraversalOrder.PREORDER, mode).traverse(root):
        count += 1
    return count


def tree_height(root: Optional[Node],
                mode: ExecutionMode = ExecutionMode.RECURSIVE) -> int:
    """Return the number of nodes on the longest root-to-leaf path.

    An empty tree has height 0, a single node height 1. A degenerate tree
    of n nodes has height n.
    """
    height = 0
    for _, depth in create_traverser(TraversalOrder.PREORDER, mode).traverse(root):
        height = max(height, depth + 1)
    return height


def is_valid_bst(root: Optional[Node]) -> bool:
    """Check the ordering invariant for every node.

    Left subtrees must hold strictly smaller keys and right subtrees keys
    greater than or equal to their ancestor's key. Always walks with an
    explicit stack so it can check trees of any height.

    Example:
        >>> node = Node(15)
        >>> node.left = Node(16)
        >>> is_valid_bst(node)
        False
    """
    if root is None:
        return True

    # Stack holds (node, inclusive lower bound, exclusive upper bound)
    stack: List[Tuple[Node, Optional[int], Optional[int]]] = [(root, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.key < low:
            return False
        if high is not None and node.key >= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.key))
        if node.right is not None:
            stack.append((node.right, node.key, high))

    return True


def get_tree_stats(root: Optional[Node],
                   mode: ExecutionMode = ExecutionMode.RECURSIVE) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Root of the tree
        mode: Recursive or iterative walk

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Total nodes: {stats['total_nodes']}")
        >>> print(f"Height: {stats['height']}")
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'min_key': None,
        'max_key': None,
        'depths': {}
    }

    for node, (key, depth) in collect_tree_data(
        root, TraversalOrder.PREORDER, DepthCollector(), mode
    ):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth + 1)

        if stats['min_key'] is None or key < stats['min_key']:
            stats['min_key'] = key
        if stats['max_key'] is None or key > stats['max_key']:
            stats['max_key'] = key

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    return stats
