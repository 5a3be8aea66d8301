"""Repository for Tweet domain entities."""

import logging
from collections.abc import Collection

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from chirper.domain.common.value_objects.ids import TweetId, UserId
from chirper.domain.social.entities.tweet import Tweet
from chirper.infrastructure.persistence.models import Tweet as TweetORM
from chirper.infrastructure.social.mappers.tweet_mapper import TweetMapper

logger = logging.getLogger(__name__)


class TweetRepository:
    """Repository for Tweet domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TweetMapper()

    def find_by_id(self, tweet_id: TweetId) -> Tweet | None:
        """
        Find a tweet by ID, deleted or not.

        Args:
            tweet_id: The tweet ID

        Returns:
            Tweet entity if found, None otherwise
        """
        orm_model = self.db.get(TweetORM, tweet_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_ids(
        self, user_ids: Collection[UserId], offset: int, limit: int
    ) -> list[Tweet]:
        """
        Non-deleted tweets by any of the authors, newest first.

        Ties on created_at are broken by id so pages never overlap.
        """
        if not user_ids:
            return []

        stmt = self._newest_first(
            select(TweetORM).where(
                TweetORM.user_id.in_([user_id.value for user_id in user_ids]),
                TweetORM.is_deleted.is_(False),
            )
        )
        return self._fetch(stmt.offset(offset).limit(limit))

    def count_by_user_ids(self, user_ids: Collection[UserId]) -> int:
        if not user_ids:
            return 0

        stmt = select(func.count()).select_from(TweetORM).where(
            TweetORM.user_id.in_([user_id.value for user_id in user_ids]),
            TweetORM.is_deleted.is_(False),
        )
        return self.db.execute(stmt).scalar_one()

    def find_by_user_id(self, user_id: UserId, offset: int, limit: int) -> list[Tweet]:
        """Non-deleted tweets of one author, newest first."""
        stmt = self._newest_first(
            select(TweetORM).where(
                TweetORM.user_id == user_id.value, TweetORM.is_deleted.is_(False)
            )
        )
        return self._fetch(stmt.offset(offset).limit(limit))

    def search(self, keyword: str, offset: int, limit: int) -> list[Tweet]:
        stmt = self._newest_first(
            select(TweetORM).where(
                TweetORM.content.icontains(keyword, autoescape=True),
                TweetORM.is_deleted.is_(False),
            )
        )
        return self._fetch(stmt.offset(offset).limit(limit))

    def count_search(self, keyword: str) -> int:
        stmt = select(func.count()).select_from(TweetORM).where(
            TweetORM.content.icontains(keyword, autoescape=True),
            TweetORM.is_deleted.is_(False),
        )
        return self.db.execute(stmt).scalar_one()

    def save(self, tweet: Tweet) -> Tweet:
        """
        Save a tweet entity.

        New tweets are inserted; existing ones only get their deletion
        state and updated_at written back.
        """
        orm_model = self.db.get(TweetORM, tweet.id.value)
        if orm_model:
            orm_model = self.mapper.to_orm(tweet, orm_model)
        else:
            orm_model = self.mapper.to_orm(tweet)
            self.db.add(orm_model)

        self.db.flush()
        logger.debug(f"Saved tweet {tweet.id}")
        return self.mapper.to_domain(orm_model)

    def _fetch(self, stmt: Select[tuple[TweetORM]]) -> list[Tweet]:
        return [self.mapper.to_domain(row) for row in self.db.execute(stmt).scalars()]

    @staticmethod
    def _newest_first(stmt: Select[tuple[TweetORM]]) -> Select[tuple[TweetORM]]:
        return stmt.order_by(TweetORM.created_at.desc(), TweetORM.id.desc())
