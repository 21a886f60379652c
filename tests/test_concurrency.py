"""
Concurrency tests for the lock-guarded tree wrappers.
"""

import asyncio
import random
import threading
from concurrent.futures import ThreadPoolExecutor

from rbtree.engine import AsyncGuardedTree, GuardedTree
from rbtree.models import Color, RedBlackTree, TraversalOrder


class TestGuardedTree:
    """Thread-level tests for GuardedTree."""

    def test_basic_operations(self, guarded_tree):
        guarded_tree.insert(10)
        guarded_tree.insert(5)

        assert guarded_tree.search(10) == (10, Color.BLACK)
        assert guarded_tree.search(5) == (5, Color.RED)
        assert guarded_tree.search(7) is None
        assert guarded_tree.has(5)
        assert guarded_tree.size() == 2
        assert guarded_tree.traverse(TraversalOrder.PRE) == [
            (10, Color.BLACK),
            (5, Color.RED),
        ]
        assert guarded_tree.range(6) == [(10, Color.BLACK)]

    def test_wraps_existing_tree(self, sample2):
        guarded = GuardedTree(sample2)
        assert guarded.size() == 7
        assert guarded.validate() == sample2.black_height()

    def test_many_concurrent_writers(self, guarded_tree):
        """Test concurrent inserts from many threads keep the tree valid."""

        def writer(writer_id: int) -> None:
            for i in range(200):
                guarded_tree.insert(writer_id * 1000 + i)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(writer, range(8)))

        assert guarded_tree.size() == 1600
        guarded_tree.validate()
        keys = [k for k, _ in guarded_tree.traverse()]
        assert keys == sorted(w * 1000 + i for w in range(8) for i in range(200))

    def test_readers_alongside_writers(self, guarded_tree):
        """Test readers never observe an invalid tree mid-insert."""
        guarded_tree.insert_many(list(range(0, 1000, 2)))
        stop = threading.Event()
        failures: list[Exception] = []

        def reader() -> None:
            rng = random.Random()
            while not stop.is_set():
                try:
                    assert guarded_tree.has(rng.randrange(0, 1000, 2))
                    guarded_tree.validate()
                except Exception as e:
                    failures.append(e)
                    return

        readers = [threading.Thread(target=reader) for _ in range(4)]
        for thread in readers:
            thread.start()

        for i in range(1, 1000, 2):
            guarded_tree.insert(i)

        stop.set()
        for thread in readers:
            thread.join()

        assert failures == []
        assert guarded_tree.size() == 1000


class TestAsyncGuardedTree:
    """Asyncio-level tests for AsyncGuardedTree."""

    async def test_basic_operations(self, async_guarded_tree):
        await async_guarded_tree.insert(3)
        await async_guarded_tree.insert(1)
        await async_guarded_tree.insert(2)

        assert await async_guarded_tree.search(2) == (2, Color.BLACK)
        assert await async_guarded_tree.search(4) is None
        assert await async_guarded_tree.has(1)
        assert await async_guarded_tree.size() == 3
        assert await async_guarded_tree.traverse() == [
            (1, Color.RED),
            (2, Color.BLACK),
            (3, Color.RED),
        ]
        assert await async_guarded_tree.range(2, 3) == [(2, Color.BLACK)]

    async def test_many_concurrent_writers(self, async_guarded_tree):
        """Test many concurrent insert tasks."""

        async def writer(writer_id: int) -> None:
            for i in range(100):
                await async_guarded_tree.insert(f"w{writer_id:02d}-{i:03d}")

        await asyncio.gather(*(writer(i) for i in range(10)))

        assert await async_guarded_tree.size() == 1000
        await async_guarded_tree.validate()

    async def test_batches_and_readers(self):
        """Test batch inserts interleaved with readers keep the tree valid."""
        guarded = AsyncGuardedTree(RedBlackTree())

        async def batch(start: int) -> int:
            return await guarded.insert_many(list(range(start, start + 50)))

        async def reader() -> bool:
            for _ in range(20):
                await guarded.validate()
                await asyncio.sleep(0)
            return True

        results = await asyncio.gather(
            *(batch(i * 50) for i in range(6)), *(reader() for _ in range(3))
        )

        assert results[:6] == [50] * 6
        assert all(results[6:])
        keys = [k for k, _ in await guarded.traverse()]
        assert keys == list(range(300))
