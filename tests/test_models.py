"""
Tests for data models: Color, Side, Node, FixupStats, exceptions and formatting.
"""

import pytest

from rbtree.models import (
    Color,
    FixupStats,
    InvariantViolation,
    Node,
    RedBlackTree,
    RotationError,
    Side,
    TraversalOrder,
    describe_node,
    format_tree,
    label,
)


class TestNode:
    """Tests for Node and its enums."""

    def test_new_node_is_red_leaf(self):
        """Test a fresh node has no relations and is red."""
        node = Node(key=5)
        assert node.color == Color.RED
        assert node.is_red
        assert node.parent is None
        assert node.left is None
        assert node.right is None

    def test_child_accessors(self):
        """Test child()/set_child() map sides to fields."""
        node = Node(key=5)
        node.set_child(Side.LEFT, 3)
        node.set_child(Side.RIGHT, 7)

        assert node.left == 3
        assert node.right == 7
        assert node.child(Side.LEFT) == 3
        assert node.child(Side.RIGHT) == 7

    def test_side_opposite(self):
        """Test Side.opposite is an involution."""
        assert Side.LEFT.opposite is Side.RIGHT
        assert Side.RIGHT.opposite is Side.LEFT
        assert Side.LEFT.opposite.opposite is Side.LEFT


class TestFixupStats:
    """Tests for FixupStats."""

    def test_rotations_total(self):
        stats = FixupStats(rotations_left=2, rotations_right=3)
        assert stats.rotations == 5

    def test_reset(self):
        stats = FixupStats(inserts=4, recolors=1, rotations_left=2, rotations_right=3)
        stats.reset()
        assert stats == FixupStats()


class TestExceptions:
    """Tests for custom exceptions."""

    def test_rotation_error(self):
        """Test RotationError carries key and side."""
        err = RotationError(42, "left")
        assert err.key == 42
        assert err.side == "left"
        assert "right child" in str(err)
        assert isinstance(err, RuntimeError)

    def test_invariant_violation(self):
        """Test InvariantViolation is an AssertionError with context."""
        err = InvariantViolation("red-red", 7, "red child of red 5")
        assert err.invariant == "red-red"
        assert err.key == 7
        assert isinstance(err, AssertionError)
        assert "red-red violated at 7" in str(err)


class TestFormatting:
    """Tests for node and tree rendering."""

    def test_label(self):
        assert label(None) == "NULL(BLACK)"
        assert label(Node(key=10)) == "10(RED)"
        assert label(Node(key=10, color=Color.BLACK)) == "10(BLACK)"

    def test_format_tree_preorder(self, sample2):
        """Test the default rendering is pre-order."""
        assert format_tree(sample2) == (
            "40(BLACK) 20(RED) 10(BLACK) 35(BLACK) 30(RED) 37(RED) 70(BLACK)"
        )

    def test_format_tree_inorder(self, sample2):
        rendered = format_tree(sample2, TraversalOrder.IN)
        assert rendered.split()[0] == "10(BLACK)"
        assert rendered.split()[-1] == "70(BLACK)"

    def test_format_empty_tree(self):
        assert format_tree(RedBlackTree()) == ""

    def test_describe_inner_node(self, sample2):
        """Test a node renders with its parent and children."""
        node = sample2.search(20)
        assert describe_node(sample2, node) == (
            "[ 20(RED)  P:40(BLACK)  L:10(BLACK)  R:35(BLACK) ]"
        )

    def test_describe_root_and_leaf(self, sample2):
        """Test absent relations render as NULL(BLACK)."""
        root = sample2.root
        assert describe_node(sample2, root).startswith("[ 40(BLACK)  P:NULL(BLACK)")

        leaf = sample2.search(10)
        assert describe_node(sample2, leaf) == (
            "[ 10(BLACK)  P:20(RED)  L:NULL(BLACK)  R:NULL(BLACK) ]"
        )

    def test_describe_missing_node(self, sample2):
        assert describe_node(sample2, None) == "[ NULL(BLACK) ]"
