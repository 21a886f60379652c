"""
Node record and enums for the Red-Black Tree.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


class Side(Enum):
    """Which child slot of a node."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class TraversalOrder(Enum):
    """Visiting order for tree traversal."""

    PRE = "pre"
    IN = "in"
    POST = "post"
    LEVEL = "level"


@dataclass
class Node(Generic[T]):
    """
    Node in the Red-Black Tree arena.

    Relations are arena indices, not references. ``None`` stands for the
    NIL leaf, which is always black.
    """

    key: T
    color: Color = Color.RED
    parent: int | None = None
    left: int | None = None
    right: int | None = None
    index: int = -1

    def child(self, side: Side) -> int | None:
        return self.left if side is Side.LEFT else self.right

    def set_child(self, side: Side, index: int | None) -> None:
        if side is Side.LEFT:
            self.left = index
        else:
            self.right = index

    @property
    def is_red(self) -> bool:
        return self.color == Color.RED
