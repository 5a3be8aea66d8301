"""Shared result types and assembly for follower/following listings."""

from dataclasses import dataclass

from chirper.application.identity.protocols.user_repository import UserRepositoryProtocol
from chirper.application.social.protocols.follow_repository import FollowRepositoryProtocol
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.entities.user import User


@dataclass
class FollowListEntry:
    user: User
    followed_by_current_user: bool


@dataclass
class FollowListResult:
    users: list[FollowListEntry]
    page: int
    total_pages: int


def build_follow_list(
    user_ids: list[UserId],
    current_user_id: UserId | None,
    user_repository: UserRepositoryProtocol,
    follow_repository: FollowRepositoryProtocol,
) -> list[FollowListEntry]:
    """
    Turn a page of relation ids into entries, keeping the page order.

    Users are loaded in one batch. The caller's own follow state is loaded
    in one more batch, and only when there is a caller.
    """
    if not user_ids:
        return []

    users_by_id = user_repository.find_by_ids(user_ids)

    followed_by_current_user: set[UserId] = set()
    if current_user_id is not None:
        followed_by_current_user = follow_repository.find_followed_user_ids_in(
            current_user_id, user_ids
        )

    # Ids whose user vanished between the two queries are skipped
    return [
        FollowListEntry(
            user=users_by_id[user_id],
            followed_by_current_user=user_id in followed_by_current_user,
        )
        for user_id in user_ids
        if user_id in users_by_id
    ]
