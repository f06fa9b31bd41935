from hypothesis import given
from hypothesis import strategies as st

from sortbench.merge import merge_runs, merge_sort


def test_merge_runs_ascending():
    source = [1, 4, 2, 3]
    target = [0, 0, 0, 0]
    merge_runs(source, target, 0, 2, 4)
    assert target == [1, 2, 3, 4]


def test_merge_runs_only_touches_its_range():
    source = [9, 1, 5, 2, 6, 9]
    target = [-1] * 6
    merge_runs(source, target, 1, 3, 5)
    assert target[0] == -1
    assert target[5] == -1
    assert target[1:5] == [1, 2, 5, 6]


def test_merge_runs_descending():
    source = [4, 1, 3, 2]
    target = [0] * 4
    merge_runs(source, target, 0, 2, 4, descending=True)
    assert target == [4, 3, 2, 1]


def test_merge_runs_with_empty_right_run():
    source = [2, 3]
    target = [0, 0]
    merge_runs(source, target, 0, 2, 2)
    assert target == [2, 3]


def test_merge_sort_trivial_inputs():
    assert merge_sort([]) == []
    assert merge_sort([4]) == [4]


def test_merge_sort_does_not_modify_input():
    data = [3, 2, 1]
    merge_sort(data)
    assert data == [3, 2, 1]


@given(st.lists(st.integers(min_value=0, max_value=10_000)))
def test_ascending_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


@given(st.lists(st.integers(min_value=0, max_value=10_000)))
def test_descending_matches_reverse_sorted(values):
    assert merge_sort(values, descending=True) == sorted(values, reverse=True)