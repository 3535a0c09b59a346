from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")

MAX_PAGE_BUTTONS = 5


def total_pages(count: int, limit: int) -> int:
    """Number of pages needed to show `count` items, `limit` per page."""

    if limit <= 0:
        raise ValueError(f"Invalid page limit: {limit}")
    if count <= 0:
        return 0
    return math.ceil(count / limit)


def page_offset(page: int, limit: int) -> int:
    return max(0, (page - 1) * limit)


def slice_page(items: Sequence[T], *, page: int, limit: int) -> tuple[T, ...]:
    """Return the window `items[(page-1)*limit : page*limit]`."""

    if limit <= 0:
        raise ValueError(f"Invalid page limit: {limit}")
    start = page_offset(page, limit)
    return tuple(items[start : start + limit])


def is_last_page(returned_count: int, limit: int) -> bool:
    # No total is available with offset paging; a full page always looks
    # like there is more, even when it happens to be the true last page.
    return returned_count < limit


def page_buttons(pages: int | None) -> tuple[int, ...]:
    """Page numbers rendered as buttons (hidden when there's a single page)."""

    if not pages or pages <= 1:
        return ()
    return tuple(range(1, min(MAX_PAGE_BUTTONS, pages) + 1))
