"""Coordinate axes."""

from enum import Enum, auto


class Axis(Enum):
    """A coordinate axis in up to four dimensions."""

    X = auto()
    Y = auto()
    Z = auto()
    W = auto()