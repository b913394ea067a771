# rhea

A small, dependency-free numeric toolkit for geometry and graphics work.

| Module | Contents |
| --- | --- |
| `rhea.vector3` | `Vector3`: mutable 3-vector with `dot`, `cross`, `norm`, `norm_square`, `normalize`, `unit`, `zeros`, `ones` and arithmetic operators |
| `rhea.vector2int` | `Vector2Int`: mutable 2-vector of ints; `+ - * /` work component-wise with another vector or an int, and division truncates toward zero |
| `rhea.matrix4x4` | `Matrix4x4`: 4x4 float matrix with `zeros`, `ones`, `identity`, `translation_row`, `translation_col`, `scaling` and the plane rotations `rotation_zw`, `rotation_yw`, `rotation_yz`, `rotation_xw`, `rotation_xz`, `rotation_xy` |
| `rhea.quaternion` | `Quaternion`: conjugate, norm, unit, inverse, and rotation by an angle about an axis |
| `rhea.range` | `Range`: integer range that steps from `start` toward `stop` in either direction |
| `rhea.interval` | `Interval`: real interval with `center`, `length`, `contains`, `surrounds`, `clamp`, `empty`, `universe` |
| `rhea.approx` | `exp_approx`, `cos_approx`, `sin_approx`: low-order Taylor approximations around zero |
| `rhea.axis` | `Axis`: the `X`, `Y`, `Z`, `W` axes |

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Usage

```python
import math

from rhea.approx import sin_approx
from rhea.axis import Axis
from rhea.interval import Interval
from rhea.matrix4x4 import Matrix4x4
from rhea.quaternion import Quaternion
from rhea.range import Range
from rhea.vector2int import Vector2Int
from rhea.vector3 import Vector3

# Vectors
a = Vector3(1, 0, 0)
b = Vector3(0, 1, 0)
print(a.cross(b))            # Vector3(x=0, y=0, z=1)
print((a + b).norm())        # 1.4142135623730951
print(Vector2Int(-7, 7) / 2) # Vector2Int(x=-3, y=3)

# Matrices: m[i][j] or m[i, j] reads and writes entries
m = Matrix4x4.translation_col(1, 2, 3) * Matrix4x4.scaling(2, 2, 2)
print(m[0, 3])               # 1.0
print(m)

# Rotate the point (1, 0, 0) a quarter turn about the z axis
p = Quaternion(0, 1, 0, 0)
print(p.rotated(math.pi / 2, Axis.Z))  # close to Quaternion(0, 0, 1, 0)

# Ranges step towards their stop value, whichever way that is
print(list(Range(5, 1)))     # [5, 4, 3, 2]

# Intervals
print(Interval(0, 10).clamp(12))  # 10
print(sin_approx(0.1))
```

`Quaternion.rotated` and `Quaternion.rotate` take an angle in radians and
either a `Vector3` axis or one of `Axis.X`, `Axis.Y`, `Axis.Z`; `Axis.W`
raises `ValueError`. `rotated_by` and `rotate_by` take an angle-axis
quaternion whose scalar part is the angle. The `rotate*` methods change the
quaternion in place and return it.

`Range.contains(value)` checks `start <= value <= stop` as written, so it
is only true for ascending ranges.

## What it does not do

This is a library only: it has no command-line tool. There is no
general-size matrix type, no matrix inverse or determinant, and no
conversion between quaternions and `Matrix4x4`.