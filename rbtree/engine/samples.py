"""
Sample trees used by the demo driver.
"""

from rbtree.models.red_black_tree import RedBlackTree

# Ascending run: exercises left rotations and color flips
SAMPLE_1 = (10, 20, 30, 40, 50, 60, 70, 80, 90, 100)

# Mixed run: exercises color flips and a single left rotation
SAMPLE_2 = (40, 20, 70, 10, 30, 35, 37)

SAMPLES = {1: SAMPLE_1, 2: SAMPLE_2}


def load_sample_1() -> RedBlackTree[int]:
    return RedBlackTree(SAMPLE_1)


def load_sample_2() -> RedBlackTree[int]:
    return RedBlackTree(SAMPLE_2)


def load_sample(number: int) -> RedBlackTree[int]:
    """Build sample tree ``number`` (1 or 2)."""
    if number not in SAMPLES:
        raise ValueError(f"Unknown sample {number}, expected one of {sorted(SAMPLES)}")
    return RedBlackTree(SAMPLES[number])
