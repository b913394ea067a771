"""Vectors, 4x4 matrices, quaternions, ranges, intervals and series approximations."""

__version__ = "0.1.0"

__all__ = [
    "approx",
    "axis",
    "interval",
    "matrix4x4",
    "quaternion",
    "range",
    "vector2int",
    "vector3",
]