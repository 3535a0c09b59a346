from __future__ import annotations

import pytest

from src.domain.algorithms.pagination import (
    is_last_page,
    page_buttons,
    page_offset,
    slice_page,
    total_pages,
)


@pytest.mark.parametrize(
    ("count", "limit", "expected"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (23, 10, 3), (5, 1, 5)],
)
def test_total_pages_is_ceiling(count: int, limit: int, expected: int) -> None:
    assert total_pages(count, limit) == expected


def test_total_pages_rejects_non_positive_limit() -> None:
    with pytest.raises(ValueError):
        total_pages(3, 0)


def test_slice_page_matches_python_slicing() -> None:
    data = list(range(23))
    for limit in (1, 4, 10, 30):
        for page in range(1, 8):
            assert slice_page(data, page=page, limit=limit) == tuple(
                data[(page - 1) * limit : page * limit]
            )


def test_last_of_23_items_at_limit_10_holds_indices_20_to_22() -> None:
    data = list(range(23))
    assert total_pages(len(data), 10) == 3
    assert slice_page(data, page=3, limit=10) == (20, 21, 22)


def test_page_offset() -> None:
    assert page_offset(1, 10) == 0
    assert page_offset(3, 25) == 50


def test_full_page_is_never_treated_as_last() -> None:
    assert is_last_page(9, 10) is True
    assert is_last_page(0, 10) is True
    assert is_last_page(10, 10) is False


def test_page_buttons_capped_at_five_and_hidden_for_single_page() -> None:
    assert page_buttons(None) == ()
    assert page_buttons(0) == ()
    assert page_buttons(1) == ()
    assert page_buttons(3) == (1, 2, 3)
    assert page_buttons(12) == (1, 2, 3, 4, 5)
