"""Social domain layer: tweets, follows, likes and retweets."""

from chirper.domain.social.entities import Follow, Like, Retweet, Tweet
from chirper.domain.social.exceptions import (
    AlreadyFollowingError,
    AlreadyLikedError,
    AlreadyRetweetedError,
    InvalidSearchKeywordError,
    NotFollowingError,
    NotTweetAuthorError,
    SelfFollowError,
    TweetAlreadyDeletedError,
    TweetNotFoundError,
)

__all__ = [
    "AlreadyFollowingError",
    "AlreadyLikedError",
    "AlreadyRetweetedError",
    "Follow",
    "InvalidSearchKeywordError",
    "Like",
    "NotFollowingError",
    "NotTweetAuthorError",
    "Retweet",
    "SelfFollowError",
    "Tweet",
    "TweetAlreadyDeletedError",
    "TweetNotFoundError",
]
