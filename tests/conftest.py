"""
Shared pytest fixtures for Red-Black Tree tests.
"""

import random

import pytest

from rbtree.engine import AsyncGuardedTree, GuardedTree, load_sample_1, load_sample_2
from rbtree.models import RedBlackTree


@pytest.fixture
def tree():
    """Provide an empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def sample1():
    """Provide the ascending 10..100 sample tree."""
    return load_sample_1()


@pytest.fixture
def sample2():
    """Provide the 40,20,70,10,30,35,37 sample tree."""
    return load_sample_2()


@pytest.fixture
def random_keys():
    """Provide a reproducible shuffled key list with duplicates."""
    rng = random.Random(12345)
    return [rng.randint(0, 300) for _ in range(600)]


@pytest.fixture
def guarded_tree():
    """Provide a thread-guarded tree."""
    return GuardedTree()


@pytest.fixture
def async_guarded_tree():
    """Provide an asyncio-guarded tree."""
    return AsyncGuardedTree()
