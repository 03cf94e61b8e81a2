import pytest

from dsdrills.searching import binary_search, linear_search

UNSORTED = [42, 7, 19, 7, 3, 88]
SORTED = [2, 5, 8, 12, 16, 23, 38, 56, 72, 91]


@pytest.mark.parametrize("target", UNSORTED)
def test_linear_search_finds_first_occurrence(target):
    index = linear_search(UNSORTED, target)
    assert UNSORTED[index] == target
    assert target not in UNSORTED[:index]


def test_linear_search_missing():
    assert linear_search(UNSORTED, 100) is None


def test_linear_search_empty():
    assert linear_search([], 1) is None


def test_linear_search_first_element():
    assert linear_search(UNSORTED, UNSORTED[0]) == 0


@pytest.mark.parametrize("target", SORTED)
def test_binary_search_finds_every_element(target):
    index = binary_search(SORTED, target)
    assert SORTED[index] == target


@pytest.mark.parametrize("target", [0, 3, 24, 100])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 5) is None


def test_binary_search_single():
    assert binary_search([9], 9) == 0
    assert binary_search([9], 8) is None


def test_searches_agree_on_distinct_sorted_items():
    for target in SORTED:
        assert binary_search(SORTED, target) == linear_search(SORTED, target)


def test_binary_search_with_duplicates_returns_matching_index():
    items = [1, 2, 2, 2, 3]
    index = binary_search(items, 2)
    assert items[index] == 2