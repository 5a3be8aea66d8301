"""Use cases for retweeting and undoing a retweet."""

import structlog

from chirper.application.common.exceptions import DuplicateRecordError
from chirper.application.common.unit_of_work import UnitOfWork
from chirper.application.social.protocols.reaction_repository import (
    RetweetRepositoryProtocol,
)
from chirper.application.social.protocols.tweet_repository import TweetRepositoryProtocol
from chirper.domain.common.value_objects.ids import TweetId, UserId
from chirper.domain.social.entities.retweet import Retweet
from chirper.domain.social.exceptions import AlreadyRetweetedError, TweetNotFoundError

logger = structlog.get_logger(__name__)


class RetweetUseCase:
    def __init__(
        self,
        retweet_repository: RetweetRepositoryProtocol,
        tweet_repository: TweetRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.retweet_repository = retweet_repository
        self.tweet_repository = tweet_repository
        self.unit_of_work = unit_of_work

    def retweet(self, user_id: UserId, tweet_id: TweetId) -> Retweet:
        """
        Retweet a tweet.

        Raises:
            TweetNotFoundError: If the tweet does not exist or was deleted
            AlreadyRetweetedError: If the user already retweeted this tweet
        """
        tweet = self.tweet_repository.find_by_id(tweet_id)
        if not tweet or tweet.is_deleted:
            raise TweetNotFoundError(tweet_id)

        if self.retweet_repository.find_by_user_and_tweet(user_id, tweet_id):
            raise AlreadyRetweetedError

        retweet = Retweet.create(user_id, tweet_id)

        with self.unit_of_work:
            try:
                retweet = self.retweet_repository.save(retweet)
            except DuplicateRecordError as e:
                raise AlreadyRetweetedError from e
            self.unit_of_work.commit()

        logger.info("tweet_retweeted", user_id=str(user_id), tweet_id=str(tweet_id))
        return retweet


class UnretweetUseCase:
    def __init__(
        self, retweet_repository: RetweetRepositoryProtocol, unit_of_work: UnitOfWork
    ) -> None:
        self.retweet_repository = retweet_repository
        self.unit_of_work = unit_of_work

    def unretweet(self, user_id: UserId, tweet_id: TweetId) -> None:
        """Remove a retweet. Undoing a missing retweet does nothing."""
        with self.unit_of_work:
            self.retweet_repository.delete(user_id, tweet_id)
            self.unit_of_work.commit()

        logger.info("tweet_unretweeted", user_id=str(user_id), tweet_id=str(tweet_id))
