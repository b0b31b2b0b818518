"""Data collection strategies for BSTreeLib.

DataCollectors define what a traversal emits for each visited node. This
allows the same traversal to produce plain keys, the nodes themselves, or
keys paired with their depth.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple

from .node import Node


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Depth of the node relative to the traversal root

        Returns:
            Collected data (type depends on collector)
        """
        pass


class KeyCollector(DataCollector):
    """Collects only node keys."""

    def collect(self, node: Node, depth: int) -> int:
        """Return node key."""
        return node.key


class NodeCollector(DataCollector):
    """Collects the node objects themselves (non-owning references)."""

    def collect(self, node: Node, depth: int) -> Node:
        """Return the node itself."""
        return node


class DepthCollector(DataCollector):
    """Collects (key, depth) pairs.

    Useful for inspecting tree shape, e.g. spotting degenerate chains.
    """

    def collect(self, node: Node, depth: int) -> Tuple[int, int]:
        """Return key with its depth."""
        return (node.key, depth)
