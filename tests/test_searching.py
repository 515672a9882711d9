import pytest
from hypothesis import given, strategies as st

from dsakit.searching import binary_search, is_sorted, linear_search

SORTED = [0, 5, 6, 23, 45, 50, 98]
UNSORTED = [50, 0, 23, 6, 45, 98, 5]


@pytest.mark.parametrize("target", SORTED)
def test_binary_search_finds_each_element(target):
    assert SORTED[binary_search(SORTED, target)] == target


@pytest.mark.parametrize("target", [-1, 7, 99])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 5) is None


@given(st.lists(st.integers(min_value=-50, max_value=50)), st.integers(min_value=-50, max_value=50))
def test_binary_search_agrees_with_membership(values, target):
    items = sorted(values)
    index = binary_search(items, target)
    if target in items:
        assert items[index] == target
    else:
        assert index is None


def test_linear_search_source_example():
    assert linear_search(UNSORTED, 23) == 2


def test_linear_search_returns_first_occurrence():
    assert linear_search([7, 3, 7], 7) == 0


def test_linear_search_missing():
    assert linear_search(UNSORTED, 1) is None


@given(st.lists(st.integers(min_value=0, max_value=5)), st.integers(min_value=0, max_value=5))
def test_linear_search_matches_list_index(items, target):
    index = linear_search(items, target)
    if target in items:
        assert index == items.index(target)
    else:
        assert index is None


def test_is_sorted_source_example():
    assert is_sorted([1, 12, 3, 40]) is False


@pytest.mark.parametrize("items", [[], [4], [1, 1, 2], SORTED])
def test_is_sorted_accepts_ordered(items):
    assert is_sorted(items) is True


@given(st.lists(st.integers()))
def test_is_sorted_after_sorting(values):
    assert is_sorted(sorted(values)) is True


@given(st.lists(st.integers(), min_size=2, unique=True))
def test_is_sorted_rejects_strictly_descending(values):
    assert is_sorted(sorted(values, reverse=True)) is False