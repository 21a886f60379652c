"""
Insertion-balanced Red-Black Tree.

This package provides an ordered multiset with O(log N) worst-case height:
- insert(value) - O(log N), duplicates routed right
- search(value) - O(log N), returns the node or None
- traverse(order) - pre/in/post/level order (key, color) pairs
- iterator(start, end) - in-order range walk
"""

from rbtree.models import (
    Color,
    InvariantViolation,
    Node,
    RedBlackTree,
    RotationError,
    Side,
    TraversalOrder,
)
from rbtree.engine import AsyncGuardedTree, GuardedTree

__all__ = [
    "AsyncGuardedTree",
    "Color",
    "GuardedTree",
    "InvariantViolation",
    "Node",
    "RedBlackTree",
    "RotationError",
    "Side",
    "TraversalOrder",
]
