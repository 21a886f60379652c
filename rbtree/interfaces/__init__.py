"""
Abstract base classes for ordered trees.
"""

from rbtree.interfaces.ordered_container import OrderedContainer
from rbtree.interfaces.traversable import Traversable

__all__ = ["OrderedContainer", "Traversable"]
