"""Tweet entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from chirper.domain.common.entity import Entity
from chirper.domain.common.value_objects.ids import TweetId, UserId
from chirper.domain.social.exceptions import NotTweetAuthorError, TweetAlreadyDeletedError
from chirper.domain.social.value_objects import TweetContent


@dataclass(eq=False)
class Tweet(Entity[TweetId]):
    """
    A short text post.

    Business Rules:
    - Author and content never change
    - Deletion is logical (is_deleted flag), never physical
    - Only the author may delete, and only once
    """

    id: TweetId
    user_id: UserId
    content: TweetContent
    is_deleted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_author(self, user_id: UserId) -> bool:
        """Check if the given user wrote this tweet."""
        return self.user_id == user_id

    def delete(self, requesting_user_id: UserId) -> None:
        """
        Logically delete this tweet.

        Args:
            requesting_user_id: User asking for the deletion

        Raises:
            TweetAlreadyDeletedError: If the tweet is already deleted
            NotTweetAuthorError: If the requester is not the author
        """
        if self.is_deleted:
            raise TweetAlreadyDeletedError(self.id)
        if not self.is_author(requesting_user_id):
            raise NotTweetAuthorError

        self.is_deleted = True
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(cls, user_id: UserId, content: TweetContent) -> "Tweet":
        """Create a new, live tweet."""
        now = datetime.now(UTC)
        return cls(
            id=TweetId.generate(),
            user_id=user_id,
            content=content,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: TweetId,
        user_id: UserId,
        content: TweetContent,
        is_deleted: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Tweet":
        """Reconstitute a tweet from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            content=content,
            is_deleted=is_deleted,
            created_at=created_at,
            updated_at=updated_at,
        )
