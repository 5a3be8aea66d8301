from .like_tweet_use_case import LikeTweetUseCase, UnlikeTweetUseCase
from .retweet_use_case import RetweetUseCase, UnretweetUseCase

__all__ = [
    "LikeTweetUseCase",
    "RetweetUseCase",
    "UnlikeTweetUseCase",
    "UnretweetUseCase",
]
