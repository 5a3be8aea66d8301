from collections.abc import Collection
from typing import Protocol

from chirper.domain.common.value_objects.ids import TweetId, UserId
from chirper.domain.social.entities.like import Like
from chirper.domain.social.entities.retweet import Retweet


class LikeRepositoryProtocol(Protocol):
    def find_by_user_and_tweet(self, user_id: UserId, tweet_id: TweetId) -> Like | None: ...

    def find_by_tweet_id(self, tweet_id: TweetId) -> list[Like]: ...

    def find_by_user_id(self, user_id: UserId) -> list[Like]: ...

    def count_by_tweet_ids(self, tweet_ids: Collection[TweetId]) -> dict[TweetId, int]: ...

    def find_tweet_ids_liked_by(
        self, user_id: UserId, tweet_ids: Collection[TweetId]
    ) -> set[TweetId]: ...

    def save(self, like: Like) -> Like: ...

    def delete(self, user_id: UserId, tweet_id: TweetId) -> None:
        """Remove the like if present; removing a missing like is a no-op."""
        ...


class RetweetRepositoryProtocol(Protocol):
    def find_by_user_and_tweet(self, user_id: UserId, tweet_id: TweetId) -> Retweet | None: ...

    def find_by_tweet_id(self, tweet_id: TweetId) -> list[Retweet]: ...

    def find_by_user_id(self, user_id: UserId) -> list[Retweet]: ...

    def count_by_tweet_ids(self, tweet_ids: Collection[TweetId]) -> dict[TweetId, int]: ...

    def find_tweet_ids_retweeted_by(
        self, user_id: UserId, tweet_ids: Collection[TweetId]
    ) -> set[TweetId]: ...

    def save(self, retweet: Retweet) -> Retweet: ...

    def delete(self, user_id: UserId, tweet_id: TweetId) -> None:
        """Remove the retweet if present; removing a missing retweet is a no-op."""
        ...
