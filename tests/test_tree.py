"""Tests for the BinarySearchTree handle."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import (
    BinarySearchTree,
    ConfigurationError,
    ExecutionMode,
    TraversalOrder,
    TreeConfig,
)
from conftest import DEMO_KEYS


def test_new_tree_is_empty():
    tree = BinarySearchTree()
    assert tree.is_empty
    assert len(tree) == 0
    assert tree.root is None
    assert tree.height() == 0
    assert list(tree.inorder()) == []
    assert tree.search(1) is None


def test_default_config_is_recursive():
    tree = BinarySearchTree()
    assert tree.config.mode == ExecutionMode.RECURSIVE
    assert tree.config.default_order == TraversalOrder.INORDER


def test_insert_returns_root():
    tree = BinarySearchTree()
    root = tree.insert(76)
    assert root is tree.root
    assert tree.insert(33) is root


def test_demo_traversals(demo_tree):
    assert list(demo_tree.inorder()) == [80, 76, 50, 33, 20, 12, 10]
    assert list(demo_tree.preorder()) == [76, 33, 10, 20, 12, 50, 80]
    assert list(demo_tree.postorder()) == [12, 20, 10, 50, 33, 80, 76]


def test_demo_searches(demo_tree):
    found = demo_tree.search(10)
    assert found is not None
    assert found.key == 10
    assert demo_tree.search(25) is None


def test_len_and_height(demo_tree):
    assert len(demo_tree) == len(DEMO_KEYS)
    assert demo_tree.height() == 5


def test_contains(demo_tree):
    assert 50 in demo_tree
    assert 51 not in demo_tree
    assert "50" not in demo_tree
    assert demo_tree.contains(12)


def test_iter_is_preorder(demo_tree):
    assert list(demo_tree) == list(demo_tree.preorder())


def test_traverse_uses_default_order():
    tree = BinarySearchTree(TreeConfig(default_order=TraversalOrder.POSTORDER))
    tree.insert_all([2, 1, 3])
    assert list(tree.traverse()) == [1, 3, 2]
    assert list(tree.traverse("in")) == [3, 2, 1]


def test_duplicates_are_counted():
    tree = BinarySearchTree()
    tree.insert_all([5, 5, 5])
    assert len(tree) == 3
    assert list(tree.inorder()) == [5, 5, 5]
    assert tree.root.left is None


def test_teardown_resets_tree(demo_tree):
    released = demo_tree.teardown()
    assert released == len(DEMO_KEYS)
    assert demo_tree.is_empty
    assert len(demo_tree) == 0
    assert demo_tree.teardown() == 0


def test_tree_reusable_after_teardown():
    tree = BinarySearchTree()
    tree.insert_all([3, 1, 2])
    tree.teardown()
    tree.insert(9)
    assert list(tree.preorder()) == [9]


def test_context_manager_tears_down():
    with BinarySearchTree() as tree:
        tree.insert_all(DEMO_KEYS)
        first_root = tree.root
    assert tree.is_empty
    assert first_root.is_leaf()


def test_context_manager_tears_down_on_error():
    with pytest.raises(RuntimeError):
        with BinarySearchTree() as tree:
            tree.insert_all([1, 2, 3])
            raise RuntimeError("boom")
    assert tree.is_empty


def test_trees_are_independent():
    first = BinarySearchTree()
    second = BinarySearchTree()
    first.insert(1)
    assert second.is_empty
    second.insert(2)
    assert list(first) == [1]
    assert list(second) == [2]


def test_invalid_config_rejected():
    with pytest.raises(ConfigurationError) as excinfo:
        BinarySearchTree(TreeConfig(mode="fast"))
    assert "mode must be an ExecutionMode" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_iterative_tree_handles_sorted_input():
    n = sys.getrecursionlimit() * 2
    with BinarySearchTree(TreeConfig.iterative()) as tree:
        tree.insert_all(range(n))
        assert tree.height() == n
        assert tree.search(n - 1).key == n - 1
        assert next(tree.inorder()) == n - 1
        assert tree.teardown() == n


def test_repr():
    tree = BinarySearchTree()
    assert repr(tree) == "BinarySearchTree(size=0, root=None, mode='recursive')"
    tree.insert(4)
    assert "root=4" in repr(tree)
