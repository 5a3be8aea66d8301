from .follow_mapper import FollowMapper
from .reaction_mapper import LikeMapper, RetweetMapper
from .tweet_mapper import TweetMapper

__all__ = ["FollowMapper", "LikeMapper", "RetweetMapper", "TweetMapper"]
