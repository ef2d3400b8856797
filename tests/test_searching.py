import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.searching import binary_search, linear_search


def test_binary_search_finds_key_from_example():
    assert binary_search([2, 3, 6, 7, 9], 6) == 2


@pytest.mark.parametrize("key", [0, 4, 10])
def test_binary_search_missing_key(key):
    assert binary_search([2, 3, 6, 7, 9], key) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


@given(st.lists(st.integers(-50, 50)), st.integers(-50, 50))
def test_binary_search_agrees_with_membership(values, key):
    items = sorted(values)
    index = binary_search(items, key)
    if key in items:
        assert items[index] == key
    else:
        assert index is None


def test_linear_search_finds_key_from_example():
    assert linear_search([2, 5, 6, 6, 3, 8], 5) == 1


def test_linear_search_returns_first_duplicate():
    assert linear_search([2, 5, 6, 6, 3, 8], 6) == 2


def test_linear_search_missing():
    assert linear_search([2, 5, 6, 6, 3, 8], 42) is None


def test_linear_search_accepts_iterator():
    assert linear_search(iter([4, 7, 9]), 9) == 2


@given(st.lists(st.integers(-20, 20)), st.integers(-20, 20))
def test_linear_search_matches_list_index(values, key):
    result = linear_search(values, key)
    if key in values:
        assert result == values.index(key)
    else:
        assert result is None