"""Tests for the demonstration entry point."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import __main__ as demo
from bstreelib.core import operations

EXPECTED_OUTPUT = (
    "Inorder (ascending order): 80 76 50 33 20 12 10\n"
    "Preorder: 76 33 10 20 12 50 80\n"
    "Postorder: 12 20 10 50 33 80 76\n"
    "Key 10 found in the tree.\n"
    "Key 25 NOT found in the tree.\n"
)


def test_demo_output(capsys):
    """Test the demo prints traversals and search results."""
    print("\n=== Test: Demo Output ===")
    capsys.readouterr()

    status = demo.main()

    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == EXPECTED_OUTPUT
    assert captured.err == ""


def test_demo_inorder_label_is_kept(capsys):
    """The inorder line keeps its label although keys descend."""
    demo.main()
    first_line = capsys.readouterr().out.splitlines()[0]
    label, keys = first_line.split(": ")
    assert label == "Inorder (ascending order)"
    values = [int(k) for k in keys.split()]
    assert values == sorted(values, reverse=True)


def test_demo_allocation_failure(capsys, monkeypatch):
    """Allocation failure is reported on stderr with exit status 1."""
    def failing_node(key):
        raise MemoryError()

    monkeypatch.setattr(operations, "Node", failing_node)

    status = demo.main()

    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ""
    assert "Error: insufficient memory" in captured.err
