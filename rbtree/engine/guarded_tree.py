"""
Lock-guarded access to a shared RedBlackTree.

Rotations rewrite several links one after another, so a reader running
alongside an insert can see a half-rotated tree. These wrappers serialize
every public operation behind a single lock.
"""

import asyncio
import threading
from typing import Any

from rbtree.models.node import Color, TraversalOrder
from rbtree.models.red_black_tree import RedBlackTree


class GuardedTree:
    """
    Thread-safe facade over a RedBlackTree.

    Provides:
    - insert(value) / insert_many(values)
    - search(value) -> (key, color) or None
    - has(value), size()
    - traverse(order) / range(start, end) -> list snapshot
    """

    def __init__(self, tree: RedBlackTree | None = None) -> None:
        self._tree = tree if tree is not None else RedBlackTree()
        self._lock = threading.RLock()

    def insert(self, value: Any) -> None:
        with self._lock:
            self._tree.insert(value)

    def insert_many(self, values: list[Any]) -> int:
        """Insert all values atomically with respect to other callers."""
        with self._lock:
            for value in values:
                self._tree.insert(value)
            return len(values)

    def search(self, value: Any) -> tuple[Any, Color] | None:
        """Return (key, color) of the matching node, None otherwise."""
        with self._lock:
            node = self._tree.search(value)
            return (node.key, node.color) if node is not None else None

    def has(self, value: Any) -> bool:
        with self._lock:
            return self._tree.has(value)

    def size(self) -> int:
        with self._lock:
            return self._tree.size()

    def traverse(
        self, order: TraversalOrder = TraversalOrder.IN
    ) -> list[tuple[Any, Color]]:
        with self._lock:
            return list(self._tree.traverse(order))

    def range(
        self, start: Any | None = None, end: Any | None = None
    ) -> list[tuple[Any, Color]]:
        with self._lock:
            return list(self._tree.iterator(start, end))

    def validate(self) -> int:
        with self._lock:
            return self._tree.validate()


class AsyncGuardedTree:
    """
    Coroutine facade over a RedBlackTree guarded by an asyncio.Lock.

    The lock is created lazily inside the running event loop.
    """

    def __init__(self, tree: RedBlackTree | None = None) -> None:
        self._tree = tree if tree is not None else RedBlackTree()

        # Lazy initialized in async context
        self._lock: asyncio.Lock | None = None

        # Thread lock for safe async initialization
        self._init_lock = threading.Lock()

    def _ensure_lock(self) -> asyncio.Lock:
        """
        Ensure the asyncio lock exists.

        Thread-safe: Uses double-checked locking with threading.Lock.
        """
        if self._lock is not None:
            return self._lock

        with self._init_lock:
            if self._lock is None:
                self._lock = asyncio.Lock()
        return self._lock

    async def insert(self, value: Any) -> None:
        async with self._ensure_lock():
            self._tree.insert(value)

    async def insert_many(self, values: list[Any]) -> int:
        async with self._ensure_lock():
            for value in values:
                self._tree.insert(value)
                # Let other tasks queue up on the lock between inserts
                await asyncio.sleep(0)
            return len(values)

    async def search(self, value: Any) -> tuple[Any, Color] | None:
        async with self._ensure_lock():
            node = self._tree.search(value)
            return (node.key, node.color) if node is not None else None

    async def has(self, value: Any) -> bool:
        async with self._ensure_lock():
            return self._tree.has(value)

    async def size(self) -> int:
        async with self._ensure_lock():
            return self._tree.size()

    async def traverse(
        self, order: TraversalOrder = TraversalOrder.IN
    ) -> list[tuple[Any, Color]]:
        async with self._ensure_lock():
            return [pair async for pair in self._tree.async_traverse(order)]

    async def range(
        self, start: Any | None = None, end: Any | None = None
    ) -> list[tuple[Any, Color]]:
        async with self._ensure_lock():
            return list(self._tree.iterator(start, end))

    async def validate(self) -> int:
        async with self._ensure_lock():
            return self._tree.validate()
