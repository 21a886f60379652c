"""
Counters describing how much rebalancing work a tree has done.
"""

from dataclasses import dataclass


@dataclass
class FixupStats:
    """Running totals of insert fix-up activity."""

    inserts: int = 0
    recolors: int = 0
    rotations_left: int = 0
    rotations_right: int = 0

    @property
    def rotations(self) -> int:
        return self.rotations_left + self.rotations_right

    def reset(self) -> None:
        self.inserts = 0
        self.recolors = 0
        self.rotations_left = 0
        self.rotations_right = 0
