from .create_tweet_use_case import CreateTweetUseCase
from .delete_tweet_use_case import DeleteTweetUseCase
from .get_tweet_use_case import GetTweetUseCase, TweetResult

__all__ = [
    "CreateTweetUseCase",
    "DeleteTweetUseCase",
    "GetTweetUseCase",
    "TweetResult",
]
