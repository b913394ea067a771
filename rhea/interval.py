"""Closed real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Interval:
    """The real interval between ``left`` and ``right``."""

    left: float
    right: float

    @staticmethod
    def empty() -> Interval:
        """Return an interval that contains no value."""
        return Interval(math.inf, -math.inf)

    @staticmethod
    def universe() -> Interval:
        """Return an interval that contains every finite value."""
        return Interval(-math.inf, math.inf)

    def center(self) -> float:
        """Return the midpoint of the interval."""
        return (self.left + self.right) / 2.0

    def length(self) -> float:
        """Return the distance between the two ends."""
        return abs(self.right - self.left)

    def min(self) -> float:
        """Return the smaller end."""
        return self.left if self.left < self.right else self.right

    def max(self) -> float:
        """Return the larger end."""
        return self.left if self.left > self.right else self.right

    def direction(self) -> int:
        """Return -1 when right lies below left and 1 otherwise."""
        return -1 if self.right < self.left else 1

    def contains(self, value: float) -> bool:
        """Return whether ``left <= value <= right``."""
        return self.left <= value <= self.right

    def surrounds(self, value: float) -> bool:
        """Return whether ``left < value < right``."""
        return self.left < value < self.right

    def clamp(self, value: float) -> float:
        """Return ``value`` limited to lie between left and right."""
        if value < self.left:
            return self.left
        if value > self.right:
            return self.right
        return value