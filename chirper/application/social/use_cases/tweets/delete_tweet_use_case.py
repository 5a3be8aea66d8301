"""Use case for deleting a tweet."""

import structlog

from chirper.application.common.unit_of_work import UnitOfWork
from chirper.application.social.protocols.tweet_repository import TweetRepositoryProtocol
from chirper.domain.common.value_objects.ids import TweetId, UserId
from chirper.domain.social.exceptions import TweetNotFoundError

logger = structlog.get_logger(__name__)


class DeleteTweetUseCase:
    def __init__(
        self, tweet_repository: TweetRepositoryProtocol, unit_of_work: UnitOfWork
    ) -> None:
        self.tweet_repository = tweet_repository
        self.unit_of_work = unit_of_work

    def delete_tweet(self, tweet_id: TweetId, user_id: UserId) -> None:
        """
        Logically delete a tweet on behalf of its author.

        Args:
            tweet_id: ID of the tweet to delete
            user_id: ID of the requesting user

        Raises:
            TweetNotFoundError: If the tweet does not exist
            NotTweetAuthorError: If the requester is not the author
            TweetAlreadyDeletedError: If the tweet is already deleted
        """
        with self.unit_of_work:
            tweet = self.tweet_repository.find_by_id(tweet_id)
            if not tweet:
                raise TweetNotFoundError(tweet_id)

            tweet.delete(user_id)
            self.tweet_repository.save(tweet)
            self.unit_of_work.commit()

        logger.info("tweet_deleted", tweet_id=str(tweet_id), user_id=str(user_id))
