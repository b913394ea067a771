import pytest

from rhea.range import Range


@pytest.mark.parametrize("start, stop", [(0, 5), (-3, 4), (10, 11)])
def test_ascending_iteration_matches_builtin(start, stop):
    r = Range(start, stop)
    assert r.step == 1
    assert list(r) == list(range(start, stop))


@pytest.mark.parametrize("start, stop", [(5, 0), (4, -3), (11, 10)])
def test_descending_iteration_matches_builtin(start, stop):
    r = Range(start, stop)
    assert r.step == -1
    assert list(r) == list(range(start, stop, -1))


def test_empty_range():
    r = Range(3, 3)
    assert list(r) == []
    assert r.length() == 0
    assert r.direction() == -1


@pytest.mark.parametrize("start, stop", [(0, 5), (5, 0), (-2, 7)])
def test_length_equals_number_of_items(start, stop):
    r = Range(start, stop)
    assert r.length() == len(list(r))


def test_direction_follows_step():
    assert Range(0, 5).direction() == 1
    assert Range(5, 0).direction() == -1


@pytest.mark.parametrize("start, stop", [(0, 5), (5, 0)])
def test_min_and_max(start, stop):
    r = Range(start, stop)
    assert r.min() == min(start, stop)
    assert r.max() == max(start, stop)


def test_swap_reverses_in_place():
    r = Range(0, 5)
    result = r.swap()
    assert result is r
    assert (r.start, r.stop, r.step) == (5, 0, -1)
    assert list(r) == list(range(5, 0, -1))


def test_swap_twice_restores():
    r = Range(-2, 6)
    assert r.swap().swap() == Range(-2, 6)


def test_contains_is_inclusive_on_both_ends():
    r = Range(0, 5)
    assert r.contains(0)
    assert r.contains(5)
    assert not r.contains(-1)
    assert not r.contains(6)


def test_contains_checks_start_to_stop_order():
    r = Range(5, 0)
    assert not r.contains(3)


def test_iteration_can_be_repeated():
    r = Range(1, 4)
    assert list(r) == [1, 2, 3]
    assert list(r) == [1, 2, 3]