from drillrunner.drills.smart_pointers import (
    Cons,
    Nil,
    abs_all,
    create_empty_list,
    create_non_empty_list,
)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty == Cons(1, Nil())
    assert not non_empty == create_empty_list()


def test_abs_all_borrows_when_nothing_changes():
    values = (0, 1, 2)
    assert abs_all(values) is values


def test_abs_all_copies_when_mutation_is_needed():
    values = (-1, 0, 1)
    result = abs_all(values)
    assert result == [1, 0, 1]
    assert values == (-1, 0, 1)


def test_abs_all_owned_list():
    values = [-1, 0, 1]
    assert abs_all(values) == [1, 0, 1]
    assert values == [-1, 0, 1]