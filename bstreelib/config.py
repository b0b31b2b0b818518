"""Configuration system for BSTreeLib.

This module defines how users choose traversal orders and whether tree
operations run recursively or with an explicit stack.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class TraversalOrder(Enum):
    """Which order to visit nodes in.

    Note that INORDER walks right subtree, node, left subtree, so it
    produces keys in descending order.
    """
    INORDER = "inorder"      # Right, node, left (descending keys)
    PREORDER = "preorder"    # Node before children
    POSTORDER = "postorder"  # Children before node


class ExecutionMode(Enum):
    """How operations walk the tree.

    RECURSIVE mirrors the textbook definitions. ITERATIVE uses an explicit
    stack and is not bounded by the interpreter's recursion limit, which
    matters for degenerate trees built from sorted input.
    """
    RECURSIVE = "recursive"
    ITERATIVE = "iterative"


@dataclass
class TreeConfig:
    """Configuration for a BinarySearchTree instance."""

    mode: ExecutionMode = ExecutionMode.RECURSIVE
    default_order: TraversalOrder = TraversalOrder.INORDER

    @classmethod
    def recursive(cls) -> 'TreeConfig':
        """Create config using recursive operations (the default)."""
        return cls(mode=ExecutionMode.RECURSIVE)

    @classmethod
    def iterative(cls) -> 'TreeConfig':
        """Create config using explicit-stack operations.

        Use this for large trees whose shape is not under your control.
        """
        return cls(mode=ExecutionMode.ITERATIVE)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, ExecutionMode):
            errors.append(f"mode must be an ExecutionMode, got {self.mode!r}")

        if not isinstance(self.default_order, TraversalOrder):
            errors.append(
                f"default_order must be a TraversalOrder, got {self.default_order!r}"
            )

        return errors
