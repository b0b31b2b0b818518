"""BSTreeLib - Minimal Binary Search Tree.

BSTreeLib provides an unbalanced binary search tree over integer keys with
insertion, lookup, the three classical traversals and full teardown.

Two ways to use it:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Owning handle:
    from bstreelib import BinarySearchTree

Stateless functions over a root node:
    from bstreelib import insert, search, inorder, teardown
━━━━━━━━━━━━━━━━━━━━━━━━━━

Note: ``inorder`` visits right subtree, node, left subtree and therefore
yields keys in descending order.
"""

import logging

__version__ = "0.1.0"

from .config import TraversalOrder, ExecutionMode, TreeConfig
from .errors import BSTError, NodeAllocationError, ConfigurationError
from .core import (
    Node,
    create_node,
    insert,
    insert_iterative,
    search,
    search_iterative,
    teardown,
    teardown_iterative,
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    DataCollector,
    KeyCollector,
    NodeCollector,
    DepthCollector,
)
from .api import (
    traverse_keys,
    collect_tree_data,
    inorder,
    preorder,
    postorder,
    format_keys,
    count_nodes,
    tree_height,
    is_valid_bst,
    get_tree_stats,
)
from .tree import BinarySearchTree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Config
    "TraversalOrder",
    "ExecutionMode",
    "TreeConfig",
    # Errors
    "BSTError",
    "NodeAllocationError",
    "ConfigurationError",
    # Core
    "Node",
    "create_node",
    "insert",
    "insert_iterative",
    "search",
    "search_iterative",
    "teardown",
    "teardown_iterative",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "DataCollector",
    "KeyCollector",
    "NodeCollector",
    "DepthCollector",
    # API
    "traverse_keys",
    "collect_tree_data",
    "inorder",
    "preorder",
    "postorder",
    "format_keys",
    "count_nodes",
    "tree_height",
    "is_valid_bst",
    "get_tree_stats",
    # Handle
    "BinarySearchTree",
]
