import math

import pytest

from rhea.vector3 import Vector3


@pytest.fixture
def a():
    return Vector3(1.5, -2.0, 3.0)


@pytest.fixture
def b():
    return Vector3(-4.0, 0.5, 2.0)


def test_zeros_and_ones():
    assert list(Vector3.zeros()) == [0.0, 0.0, 0.0]
    assert list(Vector3.ones()) == [1.0, 1.0, 1.0]
    assert Vector3() == Vector3.zeros()


def test_iteration_yields_components(a):
    assert list(a) == [a.x, a.y, a.z]


def test_dot_is_symmetric(a, b):
    assert a.dot(b) == b.dot(a)


def test_norm_square_is_self_dot(a):
    assert a.norm_square() == a.dot(a)
    assert math.isclose(a.norm() ** 2, a.norm_square())


def test_cross_is_orthogonal_to_operands(a, b):
    c = a.cross(b)
    assert math.isclose(c.dot(a), 0.0, abs_tol=1e-12)
    assert math.isclose(c.dot(b), 0.0, abs_tol=1e-12)


def test_cross_is_anticommutative(a, b):
    assert a.cross(b) == -b.cross(a)


def test_cross_of_basis_vectors():
    ex = Vector3(1.0, 0.0, 0.0)
    ey = Vector3(0.0, 1.0, 0.0)
    ez = Vector3(0.0, 0.0, 1.0)
    assert ex.cross(ey) == ez
    assert ey.cross(ez) == ex


def test_unit_has_length_one_and_leaves_original(a):
    before = Vector3(a.x, a.y, a.z)
    u = a.unit()
    assert math.isclose(u.norm(), 1.0)
    assert a == before


def test_normalize_works_in_place(a):
    result = a.normalize()
    assert result is a
    assert math.isclose(a.norm(), 1.0)


def test_add_then_subtract_round_trip(a, b):
    assert (a + b) - b == a


def test_negation_sums_to_zero(a):
    assert a + (-a) == Vector3.zeros()


def test_scalar_multiplication_both_sides(a):
    assert 2.0 * a == a * 2.0
    assert a * 2.0 == a + a


def test_division_undoes_multiplication(a):
    assert (a * 4.0) / 4.0 == a


def test_in_place_operators_keep_identity(a, b):
    expected = a + b - b
    original = a
    a += b
    a -= b
    assert a is original
    assert a == expected
    a *= 3.0
    a /= 3.0
    assert a is original
    assert a == expected


def test_normalizing_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3.zeros().normalize()