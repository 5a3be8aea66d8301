from collections.abc import Collection
from typing import Protocol

from chirper.domain.common.value_objects.ids import TweetId, UserId
from chirper.domain.social.entities.tweet import Tweet


class TweetRepositoryProtocol(Protocol):
    def find_by_id(self, tweet_id: TweetId) -> Tweet | None: ...

    def find_by_user_ids(
        self, user_ids: Collection[UserId], offset: int, limit: int
    ) -> list[Tweet]:
        """Non-deleted tweets by any of the authors, newest first."""
        ...

    def count_by_user_ids(self, user_ids: Collection[UserId]) -> int: ...

    def find_by_user_id(self, user_id: UserId, offset: int, limit: int) -> list[Tweet]: ...

    def search(self, keyword: str, offset: int, limit: int) -> list[Tweet]: ...

    def count_search(self, keyword: str) -> int: ...

    def save(self, tweet: Tweet) -> Tweet: ...
