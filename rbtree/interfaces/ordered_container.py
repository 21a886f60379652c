"""
OrderedContainer abstract base class for insert-and-search ordered trees.
"""

from abc import abstractmethod
from typing import Any

from rbtree.interfaces.traversable import Traversable
from rbtree.models.node import Node


class OrderedContainer(Traversable):
    """
    Abstract base class for ordered multiset containers.

    Provides O(log N) insert and search. Equal keys are kept, not replaced.
    Inherits traversal capabilities from Traversable.

    Implementations:
    - RedBlackTree: insertion-balanced, no removal
    """

    @abstractmethod
    def insert(self, value: Any) -> None:
        """
        Insert a key. Duplicates are accepted.

        Args:
            value: The key to insert.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def search(self, value: Any) -> Node | None:
        """
        Find a node holding a key.

        Args:
            value: The key to look up.

        Returns:
            The node on the search path holding the key, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, value: Any) -> bool:
        """
        Check if a key exists.

        Args:
            value: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored keys, duplicates included.

        Time complexity: O(1)
        """
        pass
