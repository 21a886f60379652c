from rbtree.engine.guarded_tree import AsyncGuardedTree, GuardedTree
from rbtree.engine.samples import load_sample, load_sample_1, load_sample_2

__all__ = [
    "AsyncGuardedTree",
    "GuardedTree",
    "load_sample",
    "load_sample_1",
    "load_sample_2",
]
