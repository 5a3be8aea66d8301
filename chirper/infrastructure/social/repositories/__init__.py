from .follow_repository import FollowRepository
from .reaction_repository import LikeRepository, RetweetRepository
from .tweet_repository import TweetRepository

__all__ = ["FollowRepository", "LikeRepository", "RetweetRepository", "TweetRepository"]
