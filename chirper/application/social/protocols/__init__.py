from .follow_repository import FollowRepositoryProtocol
from .reaction_repository import LikeRepositoryProtocol, RetweetRepositoryProtocol
from .tweet_repository import TweetRepositoryProtocol

__all__ = [
    "FollowRepositoryProtocol",
    "LikeRepositoryProtocol",
    "RetweetRepositoryProtocol",
    "TweetRepositoryProtocol",
]
