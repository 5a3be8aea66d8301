"""Use case for posting a tweet."""

import structlog

from chirper.application.common.unit_of_work import UnitOfWork
from chirper.application.social.protocols.tweet_repository import TweetRepositoryProtocol
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.social.entities.tweet import Tweet
from chirper.domain.social.value_objects import TweetContent

logger = structlog.get_logger(__name__)


class CreateTweetUseCase:
    def __init__(
        self, tweet_repository: TweetRepositoryProtocol, unit_of_work: UnitOfWork
    ) -> None:
        self.tweet_repository = tweet_repository
        self.unit_of_work = unit_of_work

    def create_tweet(self, user_id: UserId, content: str) -> Tweet:
        """
        Post a new tweet.

        Raises:
            ValidationError: If content is blank or longer than 280 characters
        """
        tweet = Tweet.create(user_id, TweetContent(content))

        with self.unit_of_work:
            tweet = self.tweet_repository.save(tweet)
            self.unit_of_work.commit()

        logger.info("tweet_created", tweet_id=str(tweet.id), user_id=str(user_id))
        return tweet
