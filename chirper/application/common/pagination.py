"""
Pagination types for queries.

Pages are zero-based and sizes run from 1 to MAX_PAGE_SIZE.

Example:
    page_request = PageRequest(page=0, size=20)
    ids = follow_repository.find_follower_user_ids(
        user.id, page_request.offset, page_request.limit
    )
"""

from dataclasses import dataclass

from chirper.domain.common.paging import total_pages, validate_page


@dataclass(frozen=True)
class PageRequest:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page number (0-indexed)
        size: Number of items per page
    """

    page: int = 0
    size: int = 20

    def __post_init__(self) -> None:
        validate_page(self.page, self.size)

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return self.page * self.size

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.size

    def total_pages(self, total: int) -> int:
        """Total number of pages for `total` items."""
        return total_pages(total, self.size)
