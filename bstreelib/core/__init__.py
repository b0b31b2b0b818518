"""Core building blocks for BSTreeLib.

This package contains the node record, the stateless tree operations,
the traversal strategies and the data collectors.
"""

from .node import Node
from .operations import (
    create_node,
    insert,
    insert_iterative,
    search,
    search_iterative,
    teardown,
    teardown_iterative,
)
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    parse_order,
)
from .collector import DataCollector, KeyCollector, NodeCollector, DepthCollector

__all__ = [
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
    "parse_order",
    "DataCollector",
    "KeyCollector",
    "NodeCollector",
    "DepthCollector",
]
