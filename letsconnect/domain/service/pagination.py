"""Page slicing over fully loaded lists."""

from math import ceil
from typing import Sequence, TypeVar

from letsconnect.domain.error import InvalidInputError

T = TypeVar("T")


def validate_page(page: int, page_size: int) -> None:
    if page < 1:
        raise InvalidInputError("Page must be 1 or greater")
    if page_size < 1:
        raise InvalidInputError("Page size must be 1 or greater")


def page_offset(page: int, page_size: int) -> int:
    """Offset of the first item on a 1-based page."""
    validate_page(page, page_size)
    return (page - 1) * page_size


def slice_page(items: Sequence[T], page: int, page_size: int) -> tuple[list[T], int]:
    """Return the items on ``page`` and the total item count.

    Pages past the end are empty rather than an error.
    """
    start = page_offset(page, page_size)
    return list(items[start : start + page_size]), len(items)


def total_pages(total: int, page_size: int) -> int:
    return ceil(total / page_size) if page_size > 0 else 0
