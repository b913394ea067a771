"""Half-open integer ranges that walk from start toward stop."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Range:
    """An integer range from ``start`` up to but not including ``stop``.

    The step is one when ``start < stop`` and minus one otherwise, so a
    range walks toward ``stop`` in whichever direction it lies.
    """

    start: int
    stop: int
    step: int = field(init=False)

    def __post_init__(self) -> None:
        self.step = 1 if self.start < self.stop else -1

    def length(self) -> int:
        """Return the distance between start and stop."""
        return abs(self.stop - self.start)

    def direction(self) -> int:
        """Return -1 for a descending range and 1 otherwise."""
        return -1 if self.step < 0 else 1

    def min(self) -> int:
        """Return the smaller of start and stop."""
        return self.start if self.start < self.stop else self.stop

    def max(self) -> int:
        """Return the larger of start and stop."""
        return self.start if self.start > self.stop else self.stop

    def swap(self) -> Range:
        """Exchange start and stop, reverse the step, and return self."""
        self.start, self.stop = self.stop, self.start
        self.step = -self.step
        return self

    def contains(self, value: int) -> bool:
        """Return whether ``start <= value <= stop``."""
        return self.start <= value <= self.stop

    def __iter__(self) -> Iterator[int]:
        at = self.start
        if self.step > 0:
            while at < self.stop:
                yield at
                at += self.step
        else:
            while at > self.stop:
                yield at
                at += self.step