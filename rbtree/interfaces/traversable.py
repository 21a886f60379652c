"""
Traversable protocol for trees that can be walked in several orders.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any

from rbtree.models.node import Color, TraversalOrder


class Traversable(ABC):
    """
    Protocol for data structures that expose their nodes as (key, color) pairs.

    Implementations must support:
    - Full in-order iteration via __iter__
    - Ordered traversal via traverse(order)
    - Key-bounded in-order iteration via iterator(start, end)
    - Async iteration via __aiter__ and async_traverse(order)

    Every call returns a fresh iterator, so traversals are restartable.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Color]]:
        """Return an iterator over all (key, color) pairs in key order."""
        pass

    @abstractmethod
    def traverse(
        self, order: TraversalOrder = TraversalOrder.IN
    ) -> Iterator[tuple[Any, Color]]:
        """
        Return an iterator over (key, color) pairs in the given order.

        Args:
            order: PRE (root-left-right), IN, POST or LEVEL.

        Returns:
            Iterator yielding (key, color) tuples.
        """
        pass

    @abstractmethod
    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Color]]:
        """
        Return an in-order iterator over pairs with start <= key < end.

        Args:
            start: Start key (inclusive). If None, starts from the smallest key.
            end: End key (exclusive). If None, iterates to the largest key.

        Returns:
            Iterator yielding (key, color) tuples in key order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[tuple[Any, Color]]:
        """Return an async iterator over all (key, color) pairs in key order."""
        pass

    @abstractmethod
    def async_traverse(
        self, order: TraversalOrder = TraversalOrder.IN
    ) -> AsyncIterator[tuple[Any, Color]]:
        """
        Return an async iterator over (key, color) pairs in the given order.

        Args:
            order: PRE, IN, POST or LEVEL.

        Returns:
            AsyncIterator yielding (key, color) tuples.
        """
        pass
