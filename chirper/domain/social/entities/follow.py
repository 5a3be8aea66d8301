"""Follow relation entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from chirper.domain.common.entity import Entity
from chirper.domain.common.value_objects.ids import FollowId, UserId
from chirper.domain.social.exceptions import SelfFollowError


@dataclass(eq=False)
class Follow(Entity[FollowId]):
    """
    Directed edge of the social graph: follower -> followed.

    Business Rules:
    - A user cannot follow themselves (checked on every construction)
    - One relation per (follower, followed) pair; enforced by the social
      graph service pre-check and the storage uniqueness constraint
    """

    id: FollowId
    follower_user_id: UserId
    followed_user_id: UserId
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.follower_user_id == self.followed_user_id:
            raise SelfFollowError

    @classmethod
    def create(cls, follower_user_id: UserId, followed_user_id: UserId) -> "Follow":
        """
        Create a new follow relation.

        Raises:
            SelfFollowError: If both ids are the same user
        """
        return cls(
            id=FollowId.generate(),
            follower_user_id=follower_user_id,
            followed_user_id=followed_user_id,
        )

    @classmethod
    def reconstruct(
        cls,
        id: FollowId,
        follower_user_id: UserId,
        followed_user_id: UserId,
        created_at: datetime,
    ) -> "Follow":
        """Reconstitute a follow relation from persistence."""
        return cls(
            id=id,
            follower_user_id=follower_user_id,
            followed_user_id=followed_user_id,
            created_at=created_at,
        )
