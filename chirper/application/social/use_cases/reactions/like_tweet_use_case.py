"""Use cases for liking and unliking tweets."""

import structlog

from chirper.application.common.exceptions import DuplicateRecordError
from chirper.application.common.unit_of_work import UnitOfWork
from chirper.application.social.protocols.reaction_repository import LikeRepositoryProtocol
from chirper.application.social.protocols.tweet_repository import TweetRepositoryProtocol
from chirper.domain.common.value_objects.ids import TweetId, UserId
from chirper.domain.social.entities.like import Like
from chirper.domain.social.exceptions import AlreadyLikedError, TweetNotFoundError

logger = structlog.get_logger(__name__)


class LikeTweetUseCase:
    def __init__(
        self,
        like_repository: LikeRepositoryProtocol,
        tweet_repository: TweetRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.like_repository = like_repository
        self.tweet_repository = tweet_repository
        self.unit_of_work = unit_of_work

    def like(self, user_id: UserId, tweet_id: TweetId) -> Like:
        """
        Like a tweet.

        Raises:
            TweetNotFoundError: If the tweet does not exist or was deleted
            AlreadyLikedError: If the user already likes this tweet
        """
        tweet = self.tweet_repository.find_by_id(tweet_id)
        if not tweet or tweet.is_deleted:
            raise TweetNotFoundError(tweet_id)

        if self.like_repository.find_by_user_and_tweet(user_id, tweet_id):
            raise AlreadyLikedError

        like = Like.create(user_id, tweet_id)

        with self.unit_of_work:
            try:
                like = self.like_repository.save(like)
            except DuplicateRecordError as e:
                # Lost a race against a concurrent like
                raise AlreadyLikedError from e
            self.unit_of_work.commit()

        logger.info("tweet_liked", user_id=str(user_id), tweet_id=str(tweet_id))
        return like


class UnlikeTweetUseCase:
    def __init__(self, like_repository: LikeRepositoryProtocol, unit_of_work: UnitOfWork) -> None:
        self.like_repository = like_repository
        self.unit_of_work = unit_of_work

    def unlike(self, user_id: UserId, tweet_id: TweetId) -> None:
        """Remove a like. Unliking a tweet that is not liked does nothing."""
        with self.unit_of_work:
            self.like_repository.delete(user_id, tweet_id)
            self.unit_of_work.commit()

        logger.info("tweet_unliked", user_id=str(user_id), tweet_id=str(tweet_id))
