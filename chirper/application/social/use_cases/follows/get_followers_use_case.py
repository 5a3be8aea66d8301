"""Use case for listing a user's followers."""

from chirper.application.common.pagination import PageRequest
from chirper.application.identity.protocols.user_repository import UserRepositoryProtocol
from chirper.application.social.protocols.follow_repository import FollowRepositoryProtocol
from chirper.application.social.use_cases.follows.follow_list import (
    FollowListResult,
    build_follow_list,
)
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.exceptions import UserNotFoundError
from chirper.domain.identity.value_objects import Username


class GetFollowersUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        follow_repository: FollowRepositoryProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.follow_repository = follow_repository

    def get_followers(
        self,
        username: str,
        current_user_id: UserId | None = None,
        page: int = 0,
        size: int = 20,
    ) -> FollowListResult:
        """
        Get one page of a user's followers, most recent first.

        Args:
            username: Whose followers to list
            current_user_id: Caller, or None when unauthenticated
            page: Zero-based page index
            size: Page size

        Raises:
            UserNotFoundError: If no user has this username
            InvalidPageError, InvalidPageSizeError: On bad paging input
        """
        page_request = PageRequest(page, size)
        username_vo = Username(username)

        target = self.user_repository.find_by_username(username_vo)
        if not target:
            raise UserNotFoundError(username_vo.value)

        total = self.follow_repository.count_followers(target.id)
        follower_ids = self.follow_repository.find_follower_user_ids(
            target.id, page_request.offset, page_request.limit
        )

        return FollowListResult(
            users=build_follow_list(
                follower_ids, current_user_id, self.user_repository, self.follow_repository
            ),
            page=page,
            total_pages=page_request.total_pages(total),
        )
