"""
Custom exceptions for the Red-Black Tree.
"""

from typing import Any


class RotationError(RuntimeError):
    """
    Raised when a rotation is requested around a node that lacks the pivot child.

    Fix-up only rotates where the pivot exists, so this always indicates a
    programming error in the caller.
    """

    def __init__(self, key: Any, side: str):
        """
        Initialize rotation error.

        Args:
            key: Key of the node the rotation was requested around.
            side: Rotation direction ("left" or "right").
        """
        self.key = key
        self.side = side
        pivot = "right" if side == "left" else "left"
        super().__init__(
            f"rotate {side} around {key!r} requires a {pivot} child, found none"
        )


class InvariantViolation(AssertionError):
    """Raised by validate() when a Red-Black invariant does not hold."""

    def __init__(self, invariant: str, key: Any, detail: str):
        """
        Initialize invariant violation.

        Args:
            invariant: Short name of the broken invariant.
            key: Key of the node where the violation was found.
            detail: Human readable description.
        """
        self.invariant = invariant
        self.key = key
        super().__init__(f"{invariant} violated at {key!r}: {detail}")
