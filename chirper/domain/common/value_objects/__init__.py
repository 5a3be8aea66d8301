"""Common value objects shared across all domain modules."""

from .ids import FollowId, LikeId, RetweetId, TweetId, UserId

__all__ = [
    "FollowId",
    "LikeId",
    "RetweetId",
    "TweetId",
    "UserId",
]
