"""Retweet entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from chirper.domain.common.entity import Entity
from chirper.domain.common.value_objects.ids import RetweetId, TweetId, UserId


@dataclass(eq=False)
class Retweet(Entity[RetweetId]):
    """A user's re-share of a tweet. One per (user, tweet) pair."""

    id: RetweetId
    user_id: UserId
    tweet_id: TweetId
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, user_id: UserId, tweet_id: TweetId) -> "Retweet":
        return cls(id=RetweetId.generate(), user_id=user_id, tweet_id=tweet_id)

    @classmethod
    def reconstruct(
        cls, id: RetweetId, user_id: UserId, tweet_id: TweetId, created_at: datetime
    ) -> "Retweet":
        return cls(id=id, user_id=user_id, tweet_id=tweet_id, created_at=created_at)
