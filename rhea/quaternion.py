"""Quaternions made of a real scalar part and a three-vector part."""

from __future__ import annotations

import math
from numbers import Real
from typing import Union

from rhea.axis import Axis
from rhea.vector3 import Vector3

_AXIS_VECTORS = {
    Axis.X: (1.0, 0.0, 0.0),
    Axis.Y: (0.0, 1.0, 0.0),
    Axis.Z: (0.0, 0.0, 1.0),
}


class Quaternion:
    """A mutable quaternion ``scalar + vector``.

    Build it as ``Quaternion()``, ``Quaternion(s, vector)`` or
    ``Quaternion(s, x, y, z)``. The vector is copied on construction.
    For rotations the scalar part is read as an angle in radians and the
    vector as the axis.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, scalar: float = 0.0, *vector_part) -> None:
        if not vector_part:
            vector = Vector3()
        elif len(vector_part) == 1 and isinstance(vector_part[0], Vector3):
            vector = Vector3(*vector_part[0])
        elif len(vector_part) == 3:
            vector = Vector3(*(float(v) for v in vector_part))
        else:
            raise TypeError("Quaternion takes a scalar and a Vector3 or three components")
        self.scalar = float(scalar)
        self.vector = vector

    def __repr__(self) -> str:
        v = self.vector
        return f"Quaternion({self.scalar!r}, {v.x!r}, {v.y!r}, {v.z!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.scalar == other.scalar and self.vector == other.vector

    def scalar_quaternion(self) -> Quaternion:
        """Return the quaternion holding only the scalar part."""
        return Quaternion(self.scalar, 0.0, 0.0, 0.0)

    def vector_quaternion(self) -> Quaternion:
        """Return the quaternion holding only the vector part."""
        return Quaternion(0.0, self.vector)

    def conjugate(self) -> Quaternion:
        """Return the quaternion with the vector part negated."""
        return Quaternion(self.scalar, -self.vector)

    def norm(self) -> float:
        """Return the Euclidean norm."""
        return math.sqrt(self.norm_square())

    def norm_square(self) -> float:
        """Return the squared Euclidean norm."""
        return self.scalar * self.scalar + self.vector.norm_square()

    def unit(self) -> Quaternion:
        """Return this quaternion scaled to norm one."""
        return self / self.norm()

    def unit_rotation(self) -> Quaternion:
        """Return the unit rotation quaternion for angle ``scalar`` about ``vector``."""
        half = self.scalar / 2.0
        return Quaternion(math.cos(half), math.sin(half) * self.vector.unit())

    def inverse(self) -> Quaternion:
        """Return the multiplicative inverse."""
        return self.conjugate() / self.norm_square()

    def rotated_by(self, other: Quaternion) -> Quaternion:
        """Return the vector part rotated by the angle-axis quaternion ``other``."""
        rotation = other.unit_rotation()
        return rotation * self.vector_quaternion() * rotation.inverse()

    def rotated(self, radians: float, axis: Union[Vector3, Axis]) -> Quaternion:
        """Return the vector part rotated by ``radians`` about ``axis``.

        ``axis`` is either a vector or one of ``Axis.X``, ``Axis.Y``,
        ``Axis.Z``; any other axis raises ``ValueError``.
        """
        if isinstance(axis, Axis):
            try:
                axis_vector = Vector3(*_AXIS_VECTORS[axis])
            except KeyError:
                raise ValueError(f"invalid rotation axis for Quaternion: {axis}") from None
        elif isinstance(axis, Vector3):
            axis_vector = axis
        else:
            raise TypeError("axis must be a Vector3 or an Axis")
        return self.rotated_by(Quaternion(radians, axis_vector))

    def _assign(self, other: Quaternion) -> Quaternion:
        self.scalar = other.scalar
        self.vector = Vector3(*other.vector)
        return self

    def rotate_by(self, other: Quaternion) -> Quaternion:
        """Rotate in place by the angle-axis quaternion ``other`` and return self."""
        return self._assign(self.rotated_by(other))

    def rotate(self, radians: float, axis: Union[Vector3, Axis]) -> Quaternion:
        """Rotate in place by ``radians`` about ``axis`` and return self."""
        return self._assign(self.rotated(radians, axis))

    def scalarize(self) -> Quaternion:
        """Zero the vector part in place and return self."""
        self.vector = Vector3.zeros()
        return self

    def vectorize(self) -> Quaternion:
        """Zero the scalar part in place and return self."""
        self.scalar = 0.0
        return self

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.scalar, -self.vector)

    def __invert__(self) -> Quaternion:
        return self.conjugate()

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.scalar + other.scalar, self.vector + other.vector)

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.scalar - other.scalar, self.vector - other.vector)

    def __mul__(self, other: Union[Quaternion, float]) -> Quaternion:
        if isinstance(other, Quaternion):
            return Quaternion(
                self.scalar * other.scalar - self.vector.dot(other.vector),
                other.vector * self.scalar
                + self.vector * other.scalar
                + self.vector.cross(other.vector),
            )
        if isinstance(other, Real):
            return Quaternion(self.scalar * other, self.vector * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * scalar

    def __truediv__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Quaternion(self.scalar / scalar, self.vector / scalar)

    def __iadd__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        self.scalar += other.scalar
        self.vector += other.vector
        return self

    def __isub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        self.scalar -= other.scalar
        self.vector -= other.vector
        return self

    def __imul__(self, other: Union[Quaternion, float]) -> Quaternion:
        if isinstance(other, Quaternion):
            return self._assign(self * other)
        if isinstance(other, Real):
            self.scalar *= other
            self.vector *= other
            return self
        return NotImplemented

    def __itruediv__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.scalar /= scalar
        self.vector /= scalar
        return self