"""BinarySearchTree handle for BSTreeLib.

The BinarySearchTree owns the optional root node and dispatches each
operation to its recursive or iterative implementation according to its
TreeConfig. Instances share no state with each other.
"""

import logging
from typing import Iterable, Iterator, Optional, Union

from .api import tree_height, traverse_keys
from .config import ExecutionMode, TraversalOrder, TreeConfig
from .core.node import Node
from .core import operations
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class BinarySearchTree:
    """Unbalanced binary search tree over integer keys.

    Duplicate keys are accepted and routed to the right subtree.

    Example:
        >>> with BinarySearchTree() as tree:
        ...     tree.insert_all([76, 33, 80])
        ...     list(tree.inorder())
        [80, 76, 33]
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            config: Tree configuration (defaults to recursive operations)

        Raises:
            ConfigurationError: If config fails validation
        """
        self.config = config or TreeConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(config_errors)

        self.root: Optional[Node] = None
        self._size = 0

        if self.config.mode == ExecutionMode.ITERATIVE:
            self._insert = operations.insert_iterative
            self._search = operations.search_iterative
            self._teardown = operations.teardown_iterative
        else:
            self._insert = operations.insert
            self._search = operations.search
            self._teardown = operations.teardown
        logger.debug("Created tree in %s mode", self.config.mode.value)

    @property
    def is_empty(self) -> bool:
        """True if the tree has no root."""
        return self.root is None

    def insert(self, key: int) -> Node:
        """Insert a key and return the root.

        Raises:
            TypeError: If key is not an int
            NodeAllocationError: If the node cannot be allocated
        """
        was_empty = self.root is None
        self.root = self._insert(self.root, key)
        self._size += 1
        if was_empty:
            logger.debug("Tree root created with key %s", key)
        return self.root

    def insert_all(self, keys: Iterable[int]) -> None:
        """Insert keys one at a time, in iteration order."""
        for key in keys:
            self.insert(key)

    def search(self, key: int) -> Optional[Node]:
        """Return a node holding key, or None if absent."""
        return self._search(self.root, key)

    def contains(self, key: int) -> bool:
        """Check whether key is present."""
        return self.search(key) is not None

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int) or isinstance(key, bool):
            return False
        return self.contains(key)

    def traverse(self, order: Union[TraversalOrder, str, None] = None) -> Iterator[int]:
        """Yield keys in the given order (defaults to config.default_order)."""
        order = order if order is not None else self.config.default_order
        return traverse_keys(self.root, order, self.config.mode)

    def inorder(self) -> Iterator[int]:
        """Yield keys right-node-left, i.e. in descending order."""
        return self.traverse(TraversalOrder.INORDER)

    def preorder(self) -> Iterator[int]:
        """Yield keys node-left-right."""
        return self.traverse(TraversalOrder.PREORDER)

    def postorder(self) -> Iterator[int]:
        """Yield keys left-right-node."""
        return self.traverse(TraversalOrder.POSTORDER)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return tree_height(self.root, self.config.mode)

    def teardown(self) -> int:
        """Release every node and leave the tree empty.

        Returns:
            Number of nodes released
        """
        released = self._teardown(self.root)
        self.root = None
        self._size = 0
        logger.debug("Tree torn down, released %d nodes", released)
        return released

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Iterate keys in preorder."""
        return self.preorder()

    def __enter__(self) -> 'BinarySearchTree':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.teardown()

    def __repr__(self) -> str:
        root_key = self.root.key if self.root is not None else None
        return (
            f"{self.__class__.__name__}(size={self._size}, root={root_key!r}, "
            f"mode={self.config.mode.value!r})"
        )
