from .follow import Follow
from .like import Like
from .retweet import Retweet
from .tweet import Tweet

__all__ = [
    "Follow",
    "Like",
    "Retweet",
    "Tweet",
]
