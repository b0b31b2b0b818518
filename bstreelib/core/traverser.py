"""Tree traversal strategies for BSTreeLib.

Traversers implement the different orders for walking a binary search
tree. Each one yields ``(node, depth)`` pairs where depth is relative to
the root passed in (root = 0). Traversals are read-only.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple, Union

from .node import Node
from ..config import ExecutionMode, TraversalOrder


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    Subclasses provide a recursive and an iterative walk; ``traverse``
    dispatches on the configured ExecutionMode.
    """

    def __init__(self, mode: ExecutionMode = ExecutionMode.RECURSIVE):
        """Initialize traverser.

        Args:
            mode: Whether to walk recursively or with an explicit stack
        """
        self.mode = mode

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node, or None for an empty tree

        Yields:
            Tuples of (node, depth)
        """
        if root is None:
            return
        if self.mode == ExecutionMode.ITERATIVE:
            yield from self._traverse_iterative(root)
        else:
            yield from self._traverse_recursive(root, 0)

    @abstractmethod
    def _traverse_recursive(self, node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
        pass

    @abstractmethod
    def _traverse_iterative(self, root: Node) -> Iterator[Tuple[Node, int]]:
        pass


class InOrderTraverser(TreeTraverser):
    """Inorder traversal: right subtree, node, left subtree.

    Because larger keys live on the right, this yields keys in
    non-increasing (descending) order.
    """

    def _traverse_recursive(self, node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
        if node.right is not None:
            yield from self._traverse_recursive(node.right, depth + 1)
        yield (node, depth)
        if node.left is not None:
            yield from self._traverse_recursive(node.left, depth + 1)

    def _traverse_iterative(self, root: Node) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        current: Optional[Node] = root
        depth = 0

        while stack or current is not None:
            # Walk down the right spine
            while current is not None:
                stack.append((current, depth))
                current = current.right
                depth += 1

            node, node_depth = stack.pop()
            yield (node, node_depth)
            current = node.left
            depth = node_depth + 1


class PreOrderTraverser(TreeTraverser):
    """Preorder traversal: node, left subtree, right subtree.

    The root is always the first node yielded.
    """

    def _traverse_recursive(self, node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
        yield (node, depth)
        for child in node.children():
            yield from self._traverse_recursive(child, depth + 1)

    def _traverse_iterative(self, root: Node) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            yield (node, depth)
            # Right pushed first so left is visited first
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Postorder traversal: left subtree, right subtree, node.

    The root is always the last node yielded. This is the order teardown
    releases nodes in.
    """

    def _traverse_recursive(self, node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
        for child in node.children():
            yield from self._traverse_recursive(child, depth + 1)
        yield (node, depth)

    def _traverse_iterative(self, root: Node) -> Iterator[Tuple[Node, int]]:
        # Stack holds (node, depth, children_pushed)
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum or a string name.

    Args:
        order: TraversalOrder or one of inorder/in, preorder/pre,
            postorder/post (case-insensitive)

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If order name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_map = {
        'inorder': TraversalOrder.INORDER,
        'in': TraversalOrder.INORDER,
        'preorder': TraversalOrder.PREORDER,
        'pre': TraversalOrder.PREORDER,
        'postorder': TraversalOrder.POSTORDER,
        'post': TraversalOrder.POSTORDER,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower not in order_map:
        raise ValueError(
            f"Unknown traversal order: {order}. "
            f"Choose from: {', '.join(order_map.keys())}"
        )
    return order_map[order_lower]


# Factory function for creating traversers by order
def create_traverser(order: Union[TraversalOrder, str],
                     mode: ExecutionMode = ExecutionMode.RECURSIVE) -> TreeTraverser:
    """Create a traverser instance for the given order.

    Args:
        order: Traversal order as enum or string name
        mode: Recursive or iterative walk

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If order name is not recognized
    """
    traversers = {
        TraversalOrder.INORDER: InOrderTraverser,
        TraversalOrder.PREORDER: PreOrderTraverser,
        TraversalOrder.POSTORDER: PostOrderTraverser,
    }
    return traversers[parse_order(order)](mode)
