"""Real 4x4 matrices with the usual affine and rotation constructors."""

from __future__ import annotations

from numbers import Real
from typing import Callable, Iterator, List, Tuple, Union

_SIZE = 4

Index = Union[int, Tuple[int, int]]


class Matrix4x4:
    """A mutable 4x4 matrix of floats stored row by row.

    Build it with no arguments for the zero matrix, or with sixteen values
    given in row-major order. ``m[i]`` is row ``i`` as a mutable list, so
    ``m[i][j] = v`` changes an entry; ``m[i, j]`` reads or writes it too.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *values: float) -> None:
        if not values:
            values = (0.0,) * (_SIZE * _SIZE)
        if len(values) != _SIZE * _SIZE:
            raise ValueError(
                f"Matrix4x4 takes 0 or {_SIZE * _SIZE} values, got {len(values)}"
            )
        self._rows: List[List[float]] = [
            [float(v) for v in values[start:start + _SIZE]]
            for start in range(0, _SIZE * _SIZE, _SIZE)
        ]

    @classmethod
    def _from_rows(cls, rows: List[List[float]]) -> Matrix4x4:
        return cls(*(value for row in rows for value in row))

    @classmethod
    def _build(cls, entry: Callable[[int, int], float]) -> Matrix4x4:
        return cls._from_rows(
            [[entry(i, j) for j in range(_SIZE)] for i in range(_SIZE)]
        )

    @staticmethod
    def _with_entries(entries: dict) -> Matrix4x4:
        """Return the identity with the given ``(row, col): value`` entries replaced."""
        m = Matrix4x4.identity()
        for (row, col), value in entries.items():
            m[row, col] = value
        return m

    @staticmethod
    def _plane_rotation(a: int, b: int, cos_th: float, sin_th: float) -> Matrix4x4:
        return Matrix4x4._with_entries({
            (a, a): cos_th, (a, b): -sin_th,
            (b, a): sin_th, (b, b): cos_th,
        })

    @staticmethod
    def zeros() -> Matrix4x4:
        """Return the matrix with every entry zero."""
        return Matrix4x4()

    @staticmethod
    def ones() -> Matrix4x4:
        """Return the matrix with every entry one."""
        return Matrix4x4._build(lambda i, j: 1.0)

    @staticmethod
    def identity() -> Matrix4x4:
        """Return the identity matrix."""
        return Matrix4x4._build(lambda i, j: 1.0 if i == j else 0.0)

    @staticmethod
    def translation_row(tx: float, ty: float, tz: float) -> Matrix4x4:
        """Return a translation for row vectors (offset in the last row)."""
        return Matrix4x4._with_entries({(3, 0): tx, (3, 1): ty, (3, 2): tz})

    @staticmethod
    def translation_col(tx: float, ty: float, tz: float) -> Matrix4x4:
        """Return a translation for column vectors (offset in the last column)."""
        return Matrix4x4._with_entries({(0, 3): tx, (1, 3): ty, (2, 3): tz})

    @staticmethod
    def scaling(sx: float, sy: float, sz: float) -> Matrix4x4:
        """Return a scaling along the first three axes."""
        return Matrix4x4._with_entries({(0, 0): sx, (1, 1): sy, (2, 2): sz})

    @staticmethod
    def rotation_zw(cos_th: float, sin_th: float) -> Matrix4x4:
        """Return the rotation in the plane of the first two axes."""
        return Matrix4x4._plane_rotation(0, 1, cos_th, sin_th)

    @staticmethod
    def rotation_yw(cos_th: float, sin_th: float) -> Matrix4x4:
        """Return the rotation in the plane of the first and third axes."""
        return Matrix4x4._plane_rotation(0, 2, cos_th, sin_th)

    @staticmethod
    def rotation_yz(cos_th: float, sin_th: float) -> Matrix4x4:
        """Return the rotation in the plane of the first and fourth axes."""
        return Matrix4x4._plane_rotation(0, 3, cos_th, sin_th)

    @staticmethod
    def rotation_xw(cos_th: float, sin_th: float) -> Matrix4x4:
        """Return the rotation in the plane of the second and third axes."""
        return Matrix4x4._plane_rotation(1, 2, cos_th, sin_th)

    @staticmethod
    def rotation_xz(cos_th: float, sin_th: float) -> Matrix4x4:
        """Return the rotation in the plane of the second and fourth axes."""
        return Matrix4x4._plane_rotation(1, 3, cos_th, sin_th)

    @staticmethod
    def rotation_xy(cos_th: float, sin_th: float) -> Matrix4x4:
        """Return the rotation in the plane of the third and fourth axes."""
        return Matrix4x4._plane_rotation(2, 3, cos_th, sin_th)

    def __getitem__(self, index: Index):
        if isinstance(index, tuple):
            row, col = index
            return self._rows[row][col]
        return self._rows[index]

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        row, col = index
        self._rows[row][col] = float(value)

    def __iter__(self) -> Iterator[List[float]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for row in self._rows for v in row)
        return f"Matrix4x4({values})"

    def __str__(self) -> str:
        lines = [
            "[ " + "".join(f"{value:g} " for value in row) + "]"
            for row in self._rows
        ]
        return "[" + "\n ".join(lines) + "]"

    def _elementwise(
        self, other: Matrix4x4, op: Callable[[float, float], float]
    ) -> List[List[float]]:
        return [
            [op(a, b) for a, b in zip(ra, rb)]
            for ra, rb in zip(self._rows, other._rows)
        ]

    def _scaled(self, scalar: float) -> List[List[float]]:
        return [[v * scalar for v in row] for row in self._rows]

    def _product_rows(self, other: Matrix4x4) -> List[List[float]]:
        columns = list(zip(*other._rows))
        return [
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        ]

    def _replace_rows(self, rows: List[List[float]]) -> Matrix4x4:
        for row, new_row in zip(self._rows, rows):
            row[:] = [float(v) for v in new_row]
        return self

    def __neg__(self) -> Matrix4x4:
        return self * -1

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4._from_rows(self._elementwise(other, lambda a, b: a + b))

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4._from_rows(self._elementwise(other, lambda a, b: a - b))

    def __mul__(self, other: Union[Matrix4x4, float]) -> Matrix4x4:
        if isinstance(other, Matrix4x4):
            return Matrix4x4._from_rows(self._product_rows(other))
        if isinstance(other, Real):
            return Matrix4x4._from_rows(self._scaled(other))
        return NotImplemented

    def __rmul__(self, scalar: float) -> Matrix4x4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * scalar

    def __iadd__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._replace_rows(self._elementwise(other, lambda a, b: a + b))

    def __isub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._replace_rows(self._elementwise(other, lambda a, b: a - b))

    def __imul__(self, other: Union[Matrix4x4, float]) -> Matrix4x4:
        if isinstance(other, Matrix4x4):
            return self._replace_rows(self._product_rows(other))
        if isinstance(other, Real):
            return self._replace_rows(self._scaled(other))
        return NotImplemented