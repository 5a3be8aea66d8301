"""Paging rules shared by every paginated query."""

from .exceptions import InvalidPageError, InvalidPageSizeError

# Maximum allowed page size
MAX_PAGE_SIZE = 100


def validate_page(page: int, size: int) -> None:
    """
    Check a zero-based page index and a page size.

    Raises:
        InvalidPageError: If page is negative
        InvalidPageSizeError: If size is not in [1, MAX_PAGE_SIZE]
    """
    if page < 0:
        raise InvalidPageError(page)
    if size < 1 or size > MAX_PAGE_SIZE:
        raise InvalidPageSizeError(size, MAX_PAGE_SIZE)


def total_pages(total: int, size: int) -> int:
    """Number of pages needed to show `total` items, `size` per page."""
    if total <= 0:
        return 0
    return (total + size - 1) // size
