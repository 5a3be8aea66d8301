from .follow_list import FollowListEntry, FollowListResult
from .follow_user_use_case import FollowUserUseCase
from .get_followers_use_case import GetFollowersUseCase
from .get_following_use_case import GetFollowingUseCase
from .unfollow_user_use_case import UnfollowUserUseCase

__all__ = [
    "FollowListEntry",
    "FollowListResult",
    "FollowUserUseCase",
    "GetFollowersUseCase",
    "GetFollowingUseCase",
    "UnfollowUserUseCase",
]
