from .tweet_content import TweetContent

__all__ = ["TweetContent"]
