import pytest

from rhea.vector2int import Vector2Int


def test_default_is_zero_and_iterates():
    assert list(Vector2Int()) == [0, 0]
    v = Vector2Int(3, -4)
    assert list(v) == [v.x, v.y]


def test_negation_round_trip_and_sum_to_zero():
    v = Vector2Int(3, -4)
    assert -(-v) == v
    assert v + (-v) == Vector2Int()


def test_add_and_subtract_vectors_round_trip():
    a, b = Vector2Int(3, -4), Vector2Int(-7, 11)
    assert (a + b) - b == a
    assert a + b == b + a


def test_scalar_addition_both_sides():
    v = Vector2Int(3, -4)
    assert 5 + v == v + 5
    assert (v + 5) - 5 == v


def test_scalar_on_left_of_subtraction():
    v = Vector2Int(3, -4)
    assert 5 - v == -(v - 5)


def test_multiplication_forms_agree():
    v = Vector2Int(3, -4)
    assert 2 * v == v * 2
    assert v * 2 == v + v
    assert v * Vector2Int(2, 2) == v * 2


def test_exact_division_undoes_multiplication():
    a, b = Vector2Int(3, -4), Vector2Int(-7, 11)
    assert (a * b) / b == a
    assert (a * 6) / 6 == a


def test_division_truncates_toward_zero():
    assert Vector2Int(-7, 7) / 2 == Vector2Int(-3, 3)
    assert 7 / Vector2Int(-2, 2) == Vector2Int(-3, 3)


def test_component_wise_division_matches_scalar_division():
    v = Vector2Int(-9, 13)
    assert v / Vector2Int(4, 4) == v / 4


def test_in_place_operators_keep_identity():
    v = Vector2Int(3, -4)
    original = v
    expected = Vector2Int(3, -4)
    v += Vector2Int(1, 2)
    v -= Vector2Int(1, 2)
    v += 9
    v -= 9
    v *= Vector2Int(5, 5)
    v /= 5
    v *= 3
    v /= Vector2Int(3, 3)
    assert v is original
    assert v == expected


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2Int(1, 2) / 0
    with pytest.raises(ZeroDivisionError):
        Vector2Int(1, 2) / Vector2Int(1, 0)
    with pytest.raises(ZeroDivisionError):
        3 / Vector2Int(0, 1)


def test_float_operand_is_rejected():
    with pytest.raises(TypeError):
        Vector2Int(1, 2) + 0.5