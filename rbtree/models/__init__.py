"""
Data models for the Red-Black Tree.
"""

from rbtree.models.exceptions import InvariantViolation, RotationError
from rbtree.models.node import Color, Node, Side, TraversalOrder
from rbtree.models.stats import FixupStats
from rbtree.models.red_black_tree import RedBlackTree
from rbtree.models.formatting import describe_node, format_tree, label

__all__ = [
    "Color",
    "Node",
    "Side",
    "TraversalOrder",
    "FixupStats",
    "RotationError",
    "InvariantViolation",
    "RedBlackTree",
    "describe_node",
    "format_tree",
    "label",
]
