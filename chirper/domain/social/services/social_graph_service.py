"""
Domain service for social graph validation.

Validation is kept apart from mutation: callers check, then construct,
then persist. The service holds no state besides its lookup.
"""

from typing import Protocol

from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.social.entities.follow import Follow
from chirper.domain.social.exceptions import (
    AlreadyFollowingError,
    NotFollowingError,
    SelfFollowError,
)


class FollowLookup(Protocol):
    def find_by_follower_and_followed(
        self, follower_user_id: UserId, followed_user_id: UserId
    ) -> Follow | None: ...


class SocialGraphService:
    """Validates follow and unfollow requests against the current graph."""

    def __init__(self, follow_lookup: FollowLookup) -> None:
        self.follow_lookup = follow_lookup

    def validate_follow(self, follower_user_id: UserId, followed_user_id: UserId) -> None:
        """
        Check that follower may start following followed.

        Raises:
            SelfFollowError: If both ids are the same user
            AlreadyFollowingError: If the relation already exists
        """
        if follower_user_id == followed_user_id:
            raise SelfFollowError
        if self.is_following(follower_user_id, followed_user_id):
            raise AlreadyFollowingError

    def validate_unfollow(self, follower_user_id: UserId, followed_user_id: UserId) -> None:
        """
        Check that follower currently follows followed.

        Raises:
            NotFollowingError: If no relation exists
        """
        if not self.is_following(follower_user_id, followed_user_id):
            raise NotFollowingError(followed_user_id)

    def is_following(self, follower_user_id: UserId, followed_user_id: UserId) -> bool:
        """Check whether the relation exists."""
        existing = self.follow_lookup.find_by_follower_and_followed(
            follower_user_id, followed_user_id
        )
        return existing is not None
