"""Use case for viewing a user's profile page."""

from dataclasses import dataclass

from chirper.application.common.pagination import PageRequest
from chirper.application.identity.protocols.user_repository import UserRepositoryProtocol
from chirper.application.social.protocols.follow_repository import FollowRepositoryProtocol
from chirper.application.social.protocols.tweet_repository import TweetRepositoryProtocol
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.entities.user import User
from chirper.domain.identity.exceptions import UserNotFoundError
from chirper.domain.identity.value_objects import Username
from chirper.domain.social.entities.tweet import Tweet


@dataclass
class UserProfileResult:
    """Profile with counts and a page of the user's tweets."""

    user: User
    followers_count: int
    following_count: int
    followed_by_current_user: bool
    tweets: list[Tweet]


class GetUserProfileUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        follow_repository: FollowRepositoryProtocol,
        tweet_repository: TweetRepositoryProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.follow_repository = follow_repository
        self.tweet_repository = tweet_repository

    def get_profile(
        self,
        username: str,
        current_user_id: UserId | None = None,
        page: int = 0,
        size: int = 20,
    ) -> UserProfileResult:
        """
        Get a user's profile by username.

        Args:
            username: Username of the profile to show
            current_user_id: Caller, or None when unauthenticated
            page: Zero-based page of the user's tweets
            size: Page size

        Raises:
            UserNotFoundError: If no user has this username
            InvalidPageError, InvalidPageSizeError: On bad paging input
        """
        page_request = PageRequest(page, size)
        username_vo = Username(username)

        user = self.user_repository.find_by_username(username_vo)
        if not user:
            raise UserNotFoundError(username_vo.value)

        followed_by_current_user = False
        if current_user_id is not None and current_user_id != user.id:
            followed_by_current_user = (
                self.follow_repository.find_by_follower_and_followed(current_user_id, user.id)
                is not None
            )

        return UserProfileResult(
            user=user,
            followers_count=self.follow_repository.count_followers(user.id),
            following_count=self.follow_repository.count_following(user.id),
            followed_by_current_user=followed_by_current_user,
            tweets=self.tweet_repository.find_by_user_id(
                user.id, page_request.offset, page_request.limit
            ),
        )
