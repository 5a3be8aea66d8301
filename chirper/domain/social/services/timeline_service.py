"""
Domain service for timeline assembly.

The feed is strictly reverse-chronological. Tweets for all followed
authors come back from a single batched lookup; the service never loads
tweets author by author or one at a time.
"""

from collections.abc import Collection
from typing import Protocol

from chirper.domain.common.exceptions import InvalidPageSizeError
from chirper.domain.common.paging import MAX_PAGE_SIZE, total_pages, validate_page
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.social.entities.tweet import Tweet


class TimelineLookup(Protocol):
    def find_by_user_ids(
        self, user_ids: Collection[UserId], offset: int, limit: int
    ) -> list[Tweet]: ...

    def count_by_user_ids(self, user_ids: Collection[UserId]) -> int: ...


class TimelineService:
    """Builds paginated feeds from a set of followed accounts."""

    def __init__(self, tweet_lookup: TimelineLookup) -> None:
        self.tweet_lookup = tweet_lookup

    def get_timeline(
        self, followed_user_ids: Collection[UserId] | None, page: int, size: int
    ) -> list[Tweet]:
        """
        Get one page of non-deleted tweets by the given authors, newest first.

        An empty or missing author set is the normal state of a new account:
        it yields an empty page without touching storage.

        Args:
            followed_user_ids: Authors to pull tweets from
            page: Zero-based page index
            size: Page size, 1 to MAX_PAGE_SIZE

        Raises:
            InvalidPageError: If page is negative
            InvalidPageSizeError: If size is out of range
        """
        if not followed_user_ids:
            return []

        validate_page(page, size)
        return self.tweet_lookup.find_by_user_ids(
            followed_user_ids, offset=page * size, limit=size
        )

    def calculate_total_pages(
        self, followed_user_ids: Collection[UserId] | None, size: int
    ) -> int:
        """
        Number of timeline pages of the given size.

        Raises:
            InvalidPageSizeError: If size is not positive
        """
        if not followed_user_ids:
            return 0
        if size <= 0:
            raise InvalidPageSizeError(size, MAX_PAGE_SIZE)

        total = self.tweet_lookup.count_by_user_ids(followed_user_ids)
        return total_pages(total, size)
