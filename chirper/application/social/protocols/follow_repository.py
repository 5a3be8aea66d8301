from collections.abc import Collection
from typing import Protocol

from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.social.entities.follow import Follow


class FollowRepositoryProtocol(Protocol):
    def find_by_follower_and_followed(
        self, follower_user_id: UserId, followed_user_id: UserId
    ) -> Follow | None: ...

    def find_followed_user_ids(self, follower_user_id: UserId) -> list[UserId]: ...

    def find_follower_user_ids(
        self, followed_user_id: UserId, offset: int, limit: int
    ) -> list[UserId]:
        """Followers of a user, most recent relation first."""
        ...

    def find_following_user_ids(
        self, follower_user_id: UserId, offset: int, limit: int
    ) -> list[UserId]:
        """Accounts a user follows, most recent relation first."""
        ...

    def find_followed_user_ids_in(
        self, follower_user_id: UserId, target_user_ids: Collection[UserId]
    ) -> set[UserId]:
        """Subset of target_user_ids that follower_user_id follows."""
        ...

    def count_followers(self, user_id: UserId) -> int: ...

    def count_following(self, user_id: UserId) -> int: ...

    def save(self, follow: Follow) -> Follow: ...

    def delete(self, follower_user_id: UserId, followed_user_id: UserId) -> None: ...
