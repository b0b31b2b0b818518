"""Node structure for BSTreeLib.

The Node is intentionally kept simple - it's a record holding a key and
the two child links. All navigation and mutation logic lives in
``operations`` and the traversers.
"""

from typing import Iterator, Optional


class Node:
    """A single entry in a binary search tree.

    Each node exclusively owns its (optional) left and right children.
    Keys in the left subtree are strictly less than ``key``; keys in the
    right subtree are greater than or equal to it.

    Nodes compare by identity. Duplicate keys are legal, so two distinct
    nodes may carry the same key.
    """

    def __init__(self, key: int):
        """Initialize a leaf node.

        Args:
            key: Integer key stored in the node
        """
        self.key = key
        self.left: Optional['Node'] = None
        self.right: Optional['Node'] = None

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['Node']:
        """Iterate over present children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        def _key(node):
            return node.key if node is not None else None
        return (
            f"{self.__class__.__name__}(key={self.key!r}, "
            f"left={_key(self.left)!r}, right={_key(self.right)!r})"
        )
