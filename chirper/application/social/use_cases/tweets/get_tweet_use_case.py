"""Use case for fetching a single tweet."""

from dataclasses import dataclass

from chirper.application.social.protocols.reaction_repository import (
    LikeRepositoryProtocol,
    RetweetRepositoryProtocol,
)
from chirper.application.social.protocols.tweet_repository import TweetRepositoryProtocol
from chirper.domain.common.value_objects.ids import TweetId
from chirper.domain.social.entities.tweet import Tweet
from chirper.domain.social.exceptions import TweetNotFoundError


@dataclass
class TweetResult:
    tweet: Tweet
    likes_count: int
    retweets_count: int


class GetTweetUseCase:
    def __init__(
        self,
        tweet_repository: TweetRepositoryProtocol,
        like_repository: LikeRepositoryProtocol,
        retweet_repository: RetweetRepositoryProtocol,
    ) -> None:
        self.tweet_repository = tweet_repository
        self.like_repository = like_repository
        self.retweet_repository = retweet_repository

    def get_tweet(self, tweet_id: TweetId) -> TweetResult:
        """
        Get a tweet with its like and retweet counts.

        Raises:
            TweetNotFoundError: If the tweet does not exist or was deleted
        """
        tweet = self.tweet_repository.find_by_id(tweet_id)
        if not tweet or tweet.is_deleted:
            raise TweetNotFoundError(tweet_id)

        likes = self.like_repository.count_by_tweet_ids([tweet_id])
        retweets = self.retweet_repository.count_by_tweet_ids([tweet_id])

        return TweetResult(
            tweet=tweet,
            likes_count=likes.get(tweet_id, 0),
            retweets_count=retweets.get(tweet_id, 0),
        )
