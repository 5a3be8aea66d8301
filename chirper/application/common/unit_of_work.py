"""
Unit of Work interface.

The Unit of Work delimits the transaction of one write use case.

Example:
    class CreateTweetUseCase:
        def __init__(self, tweet_repository: TweetRepositoryProtocol, uow: UnitOfWork) -> None:
            self.tweet_repository = tweet_repository
            self.unit_of_work = uow

        def create_tweet(self, user_id: UserId, content: str) -> Tweet:
            with self.unit_of_work:
                tweet = self.tweet_repository.save(Tweet.create(user_id, TweetContent(content)))
                self.unit_of_work.commit()
                return tweet
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    Infrastructure layer provides concrete implementations
    (e.g., SqlAlchemyUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Discard all changes made within the unit of work."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
