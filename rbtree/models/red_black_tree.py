"""
Red-Black Tree with insertion-path balancing.

Nodes live in an arena owned by the tree and link to each other by arena
index. Nothing is ever removed, so an index stays valid for the life of the
tree and a node's key never changes once inserted.
"""

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from typing import Any, Generic, TypeVar

from rbtree.interfaces.ordered_container import OrderedContainer
from rbtree.models.exceptions import InvariantViolation, RotationError
from rbtree.models.node import Color, Node, Side, TraversalOrder
from rbtree.models.stats import FixupStats
from rbtree.models.traversal import AsyncTraversalIterator, InOrderIterator, walk

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedBlackTree(OrderedContainer, Generic[T]):
    """
    Red-Black Tree implementation of OrderedContainer.

    Properties maintained:
    1. Keys in a left subtree never exceed the node's key, keys in a right
       subtree are never below it; equal keys are inserted to the right
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from a node to an absent child has the same number of black nodes
    5. Absent children count as black
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        """
        Create an empty tree, optionally filled from an iterable of keys.

        Args:
            items: Keys inserted one by one, in iteration order.
        """
        self._nodes: list[Node[T]] = []
        self._root: int | None = None
        self.stats = FixupStats()

        if items is not None:
            for item in items:
                self.insert(item)

    # Public API

    def insert(self, value: T) -> None:
        """Insert a key, duplicates to the right. O(log N)"""
        index = len(self._nodes)

        if self._root is None:
            self._nodes.append(Node(key=value, color=Color.BLACK, index=index))
            self._root = index
            self.stats.inserts += 1
            logger.debug("Inserted %r as root", value)
            return

        # Find insertion point
        parent = self._root
        current: int | None = self._root
        while current is not None:
            parent = current
            node = self._nodes[current]
            current = node.left if value < node.key else node.right

        parent_node = self._nodes[parent]
        self._nodes.append(Node(key=value, parent=parent, index=index))
        side = Side.LEFT if value < parent_node.key else Side.RIGHT
        parent_node.set_child(side, index)

        self.stats.inserts += 1
        self._fix_insert(index)

    def search(self, value: T) -> Node[T] | None:
        """Return the node on the search path holding value. O(log N)"""
        current = self._root
        while current is not None:
            node = self._nodes[current]
            if value == node.key:
                return node
            current = node.left if value < node.key else node.right
        return None

    def has(self, value: T) -> bool:
        return self.search(value) is not None

    def size(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, value: object) -> bool:
        return self.search(value) is not None  # type: ignore[arg-type]

    @property
    def root(self) -> Node[T] | None:
        return self.node(self._root)

    def node(self, index: int | None) -> Node[T] | None:
        """Resolve an arena index; None resolves to None."""
        return None if index is None else self._nodes[index]

    def parent_of(self, node: Node[T]) -> Node[T] | None:
        return self.node(node.parent)

    def child_of(self, node: Node[T], side: Side) -> Node[T] | None:
        return self.node(node.child(side))

    # Traversal

    def __iter__(self) -> Iterator[tuple[T, Color]]:
        return self.traverse(TraversalOrder.IN)

    def traverse(
        self, order: TraversalOrder = TraversalOrder.IN
    ) -> Iterator[tuple[T, Color]]:
        return walk(self._nodes, self._root, order)

    def iterator(
        self, start: T | None = None, end: T | None = None
    ) -> Iterator[tuple[T, Color]]:
        return InOrderIterator(self._nodes, self._root, start, end)

    def __aiter__(self) -> AsyncIterator[tuple[T, Color]]:
        return self.async_traverse(TraversalOrder.IN)

    def async_traverse(
        self, order: TraversalOrder = TraversalOrder.IN
    ) -> AsyncIterator[tuple[T, Color]]:
        return AsyncTraversalIterator(self.traverse(order))

    # Fix-up

    def _color_of(self, index: int | None) -> Color:
        """Color of the node at index; absent children are black."""
        if index is None:
            return Color.BLACK
        return self._nodes[index].color

    def _side_of(self, node: Node[T]) -> Side:
        """Which child slot of its parent node occupies."""
        parent = self._nodes[node.parent]
        return Side.LEFT if parent.left == node.index else Side.RIGHT

    def _fix_insert(self, x: int) -> None:
        """Fix Red-Black Tree properties after insert."""
        nodes = self._nodes

        while x != self._root and self._color_of(nodes[x].parent) == Color.RED:
            # A red parent is never the root, so the grandparent exists
            parent = nodes[nodes[x].parent]
            grandparent = nodes[parent.parent]
            side = self._side_of(parent)
            uncle = grandparent.child(side.opposite)

            if self._color_of(uncle) == Color.RED:
                # Case 1: Uncle is red
                logger.debug(
                    "Case 1 at %r: parent %r and uncle %r red, recolor",
                    nodes[x].key, parent.key, nodes[uncle].key,
                )
                parent.color = Color.BLACK
                nodes[uncle].color = Color.BLACK
                grandparent.color = Color.RED
                self.stats.recolors += 1
                x = grandparent.index
                continue

            if parent.child(side.opposite) == x:
                # Case 2: Inner grandchild, rotate it to the outside
                logger.debug(
                    "Case 2 at %r: inner child of %r, rotate %s",
                    nodes[x].key, parent.key, side.value,
                )
                x = parent.index
                self._rotate(x, side)
                parent = nodes[nodes[x].parent]
                grandparent = nodes[parent.parent]

            # Case 3: Outer grandchild
            logger.debug(
                "Case 3 at %r: outer child of %r, rotate %s around %r",
                nodes[x].key, parent.key, side.opposite.value, grandparent.key,
            )
            parent.color = Color.BLACK
            grandparent.color = Color.RED
            self._rotate(grandparent.index, side.opposite)

        nodes[self._root].color = Color.BLACK

    # Rotations

    def _rotate_left(self, x: int) -> None:
        """Left rotation, pivoting on x's right child."""
        self._rotate(x, Side.LEFT)

    def _rotate_right(self, x: int) -> None:
        """Right rotation, pivoting on x's left child."""
        self._rotate(x, Side.RIGHT)

    def _rotate(self, x: int, direction: Side) -> None:
        """
        Rotate around x so that x moves down toward ``direction``.

        Left rotation:      x              y
                           / \\            / \\
                          a   y    ->    x   c
                             / \\        / \\
                            b   c      a   b

        Right rotation is the mirror image.
        """
        nodes = self._nodes
        x_node = nodes[x]
        y = x_node.child(direction.opposite)
        if y is None:
            raise RotationError(x_node.key, direction.value)
        y_node = nodes[y]

        inner = y_node.child(direction)
        x_node.set_child(direction.opposite, inner)
        if inner is not None:
            nodes[inner].parent = x

        y_node.parent = x_node.parent
        if x_node.parent is None:
            self._root = y
        else:
            nodes[x_node.parent].set_child(self._side_of(x_node), y)

        y_node.set_child(direction, x)
        x_node.parent = y

        if direction is Side.LEFT:
            self.stats.rotations_left += 1
        else:
            self.stats.rotations_right += 1

    # Diagnostics

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return self._height(self._root)

    def _height(self, index: int | None) -> int:
        if index is None:
            return 0
        node = self._nodes[index]
        return 1 + max(self._height(node.left), self._height(node.right))

    def black_height(self) -> int:
        """Black nodes on any root-to-leaf path, root included, NIL excluded."""
        count = 0
        current = self._root
        while current is not None:
            if self._nodes[current].color == Color.BLACK:
                count += 1
            current = self._nodes[current].left
        return count

    def snapshot(self) -> tuple | None:
        """Nested (key, color, left, right) tuples describing the tree shape."""
        return self._snapshot(self._root)

    def _snapshot(self, index: int | None) -> tuple | None:
        if index is None:
            return None
        node = self._nodes[index]
        return (
            node.key,
            node.color,
            self._snapshot(node.left),
            self._snapshot(node.right),
        )

    def validate(self) -> int:
        """
        Verify that the tree satisfies all Red-Black invariants.

        Returns:
            The tree's black-height (see black_height()).

        Raises:
            InvariantViolation: On the first broken invariant found.
        """
        if self._root is None:
            return 0

        root = self._nodes[self._root]
        if root.parent is not None:
            raise InvariantViolation("root", root.key, "root has a parent")
        if root.color != Color.BLACK:
            raise InvariantViolation("root-black", root.key, "root is red")

        return self._validate_subtree(self._root, None, None)

    def _validate_subtree(self, index: int | None, low: Any, high: Any) -> int:
        """Return the black count from this node down, NIL excluded."""
        if index is None:
            return 0

        node = self._nodes[index]
        if node.index != index:
            raise InvariantViolation(
                "arena", node.key, f"stored at {index}, claims {node.index}"
            )

        if low is not None and node.key < low:
            raise InvariantViolation("bst-order", node.key, f"below lower bound {low!r}")
        if high is not None and high < node.key:
            raise InvariantViolation("bst-order", node.key, f"above upper bound {high!r}")

        for side in (Side.LEFT, Side.RIGHT):
            child = node.child(side)
            if child is None:
                continue
            if self._nodes[child].parent != index:
                raise InvariantViolation(
                    "parent-link", self._nodes[child].key, "parent index mismatch"
                )
            if node.color == Color.RED and self._nodes[child].color == Color.RED:
                raise InvariantViolation(
                    "red-red", self._nodes[child].key, f"red child of red {node.key!r}"
                )

        left_black = self._validate_subtree(node.left, low, node.key)
        right_black = self._validate_subtree(node.right, node.key, high)
        if left_black != right_black:
            raise InvariantViolation(
                "black-height",
                node.key,
                f"left subtree has {left_black}, right subtree has {right_black}",
            )

        return left_black + (1 if node.color == Color.BLACK else 0)

    def __repr__(self) -> str:
        keys = ", ".join(repr(key) for key, _ in self)
        return f"RedBlackTree([{keys}])"
