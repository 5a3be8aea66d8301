"""Like entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from chirper.domain.common.entity import Entity
from chirper.domain.common.value_objects.ids import LikeId, TweetId, UserId


@dataclass(eq=False)
class Like(Entity[LikeId]):
    """
    A user's like of a tweet.

    One like per (user, tweet) pair, enforced by the use case pre-check
    and the storage uniqueness constraint.
    """

    id: LikeId
    user_id: UserId
    tweet_id: TweetId
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, user_id: UserId, tweet_id: TweetId) -> "Like":
        return cls(id=LikeId.generate(), user_id=user_id, tweet_id=tweet_id)

    @classmethod
    def reconstruct(
        cls, id: LikeId, user_id: UserId, tweet_id: TweetId, created_at: datetime
    ) -> "Like":
        return cls(id=id, user_id=user_id, tweet_id=tweet_id, created_at=created_at)
