"""
Traversal iterators over a Red-Black Tree node arena.

All iterators are lazy and read the arena as they go; mutating the tree while
one is in flight gives undefined results.
"""

from collections import deque
from collections.abc import AsyncIterator, Iterator, Sequence
from typing import Any

from rbtree.models.node import Color, Node, TraversalOrder

Pair = tuple[Any, Color]


class InOrderIterator(Iterator[Pair]):
    """In-order iterator with optional [start, end) key bounds."""

    def __init__(
        self,
        nodes: Sequence[Node],
        root: int | None,
        start: Any | None = None,
        end: Any | None = None,
    ) -> None:
        self._nodes = nodes
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[Pair]:
        return self

    def __next__(self) -> Pair:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        if self._end is not None and not node.key < self._end:
            self._stack.clear()
            raise StopIteration

        self._push_left_path(node.right, None)
        return (node.key, node.color)

    def _push_left_path(self, index: int | None, start: Any | None) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while index is not None:
            node = self._nodes[index]
            if start is not None and node.key < start:
                index = node.right
            else:
                self._stack.append(node)
                index = node.left


def preorder(nodes: Sequence[Node], root: int | None) -> Iterator[Pair]:
    """Root, left, right."""
    stack = [root] if root is not None else []
    while stack:
        node = nodes[stack.pop()]
        yield (node.key, node.color)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def postorder(nodes: Sequence[Node], root: int | None) -> Iterator[Pair]:
    """Left, right, root."""
    stack: list[tuple[int, bool]] = [(root, False)] if root is not None else []
    while stack:
        index, expanded = stack.pop()
        node = nodes[index]
        if expanded:
            yield (node.key, node.color)
            continue
        stack.append((index, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def level_order(nodes: Sequence[Node], root: int | None) -> Iterator[Pair]:
    """Breadth first, left to right within a level."""
    queue = deque([root]) if root is not None else deque()
    while queue:
        node = nodes[queue.popleft()]
        yield (node.key, node.color)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def walk(
    nodes: Sequence[Node], root: int | None, order: TraversalOrder
) -> Iterator[Pair]:
    """Return a fresh iterator for the requested order."""
    if order is TraversalOrder.PRE:
        return preorder(nodes, root)
    if order is TraversalOrder.IN:
        return InOrderIterator(nodes, root)
    if order is TraversalOrder.POST:
        return postorder(nodes, root)
    if order is TraversalOrder.LEVEL:
        return level_order(nodes, root)
    raise ValueError(f"Unknown traversal order: {order!r}")


class AsyncTraversalIterator(AsyncIterator[Pair]):
    """Async iterator over a traversal (in-memory, no I/O)."""

    def __init__(self, source: Iterator[Pair]) -> None:
        self._source = source

    def __aiter__(self) -> "AsyncTraversalIterator":
        return self

    async def __anext__(self) -> Pair:
        try:
            return next(self._source)
        except StopIteration:
            raise StopAsyncIteration from None
