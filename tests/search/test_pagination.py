from __future__ import annotations

import random

import pytest

from src.user_management.user_management.core.exceptions import InvalidPageNumberError, InvalidPageSizeError
from src.user_management.user_management.search.pagination import paginate


def test_first_and_last_pages():
    items = list(range(25))

    first = paginate(items, 0, 10)
    assert first.items == list(range(10))
    assert first.total_pages == 3
    assert first.has_next is True

    last = paginate(items, 2, 10)
    assert last.items == [20, 21, 22, 23, 24]
    assert last.has_next is False


def test_page_past_the_end_is_empty_not_an_error():
    page = paginate([1, 2, 3], 5, 2)
    assert page.items == []
    assert page.total_elements == 3


def test_empty_sequence():
    assert paginate([], 0, 10).items == []


@pytest.mark.parametrize("size", [0, -1, -50])
def test_non_positive_size_is_rejected(size):
    with pytest.raises(InvalidPageSizeError):
        paginate([1, 2, 3], 0, size)


@pytest.mark.parametrize("page", [-1, -10])
def test_negative_page_is_rejected(page):
    with pytest.raises(InvalidPageNumberError):
        paginate([1, 2, 3], page, 10)


@pytest.mark.parametrize("seed", range(20))
def test_page_length_and_contiguity(seed):
    rng = random.Random(seed)
    total = rng.randint(0, 60)
    items = list(range(total))
    size = rng.randint(1, 15)
    page = rng.randint(0, 8)

    result = paginate(items, page, size).items
    start = page * size

    assert len(result) == max(0, min(size, total - start))
    assert result == items[start:start + len(result)]
