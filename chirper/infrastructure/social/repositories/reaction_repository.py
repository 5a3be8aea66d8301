"""
Repositories for tweet reactions.

Likes and retweets share one table shape, (user, tweet) unique, so both
repositories are thin subclasses of a common SQLAlchemy implementation.
"""

from collections.abc import Collection
from typing import Generic, Protocol, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from chirper.application.common.exceptions import DuplicateRecordError
from chirper.domain.common.value_objects.ids import TweetId, UserId
from chirper.domain.social.entities.like import Like
from chirper.domain.social.entities.retweet import Retweet
from chirper.infrastructure.persistence.integrity import violates_unique_constraint
from chirper.infrastructure.persistence.models import Like as LikeORM
from chirper.infrastructure.persistence.models import Retweet as RetweetORM
from chirper.infrastructure.social.mappers.reaction_mapper import LikeMapper, RetweetMapper

ReactionT = TypeVar("ReactionT", Like, Retweet)
ReactionORMT = TypeVar("ReactionORMT", LikeORM, RetweetORM)


class ReactionMapper(Protocol[ReactionT, ReactionORMT]):
    def to_domain(self, orm_model: ReactionORMT) -> ReactionT: ...

    def to_orm(self, domain_entity: ReactionT) -> ReactionORMT: ...


class _ReactionRepository(Generic[ReactionT, ReactionORMT]):
    orm_class: type[ReactionORMT]
    constraint: str
    unique_constraint: str

    def __init__(self, db: Session, mapper: ReactionMapper[ReactionT, ReactionORMT]) -> None:
        self.db = db
        self.mapper = mapper

    def find_by_user_and_tweet(self, user_id: UserId, tweet_id: TweetId) -> ReactionT | None:
        stmt = select(self.orm_class).where(
            self.orm_class.user_id == user_id.value,
            self.orm_class.tweet_id == tweet_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_tweet_id(self, tweet_id: TweetId) -> list[ReactionT]:
        stmt = (
            select(self.orm_class)
            .where(self.orm_class.tweet_id == tweet_id.value)
            .order_by(self.orm_class.created_at.desc())
        )
        return [self.mapper.to_domain(row) for row in self.db.execute(stmt).scalars()]

    def find_by_user_id(self, user_id: UserId) -> list[ReactionT]:
        stmt = (
            select(self.orm_class)
            .where(self.orm_class.user_id == user_id.value)
            .order_by(self.orm_class.created_at.desc())
        )
        return [self.mapper.to_domain(row) for row in self.db.execute(stmt).scalars()]

    def count_by_tweet_ids(self, tweet_ids: Collection[TweetId]) -> dict[TweetId, int]:
        """Reaction counts for many tweets in one grouped query; zero counts are omitted."""
        if not tweet_ids:
            return {}

        stmt = (
            select(self.orm_class.tweet_id, func.count())
            .where(self.orm_class.tweet_id.in_([tweet_id.value for tweet_id in tweet_ids]))
            .group_by(self.orm_class.tweet_id)
        )
        return {TweetId(tweet_id): count for tweet_id, count in self.db.execute(stmt).all()}

    def _find_tweet_ids_reacted_by(
        self, user_id: UserId, tweet_ids: Collection[TweetId]
    ) -> set[TweetId]:
        if not tweet_ids:
            return set()

        stmt = select(self.orm_class.tweet_id).where(
            self.orm_class.user_id == user_id.value,
            self.orm_class.tweet_id.in_([tweet_id.value for tweet_id in tweet_ids]),
        )
        return {TweetId(value) for value in self.db.execute(stmt).scalars()}

    def save(self, reaction: ReactionT) -> ReactionT:
        """
        Insert a reaction.

        Raises:
            DuplicateRecordError: If the user already reacted to the tweet this way
            IntegrityError: If any other constraint fails
        """
        orm_model = self.mapper.to_orm(reaction)
        self.db.add(orm_model)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            if violates_unique_constraint(e, self.orm_class.__table__, self.unique_constraint):
                raise DuplicateRecordError(self.constraint) from e
            raise
        return self.mapper.to_domain(orm_model)

    def delete(self, user_id: UserId, tweet_id: TweetId) -> None:
        """Remove the reaction if present."""
        stmt = delete(self.orm_class).where(
            self.orm_class.user_id == user_id.value,
            self.orm_class.tweet_id == tweet_id.value,
        )
        self.db.execute(stmt)


class LikeRepository(_ReactionRepository[Like, LikeORM]):
    """Repository for Like entities."""

    orm_class = LikeORM
    constraint = "like"
    unique_constraint = "uq_likes_user_tweet"

    def __init__(self, db: Session) -> None:
        super().__init__(db, LikeMapper())

    def find_tweet_ids_liked_by(
        self, user_id: UserId, tweet_ids: Collection[TweetId]
    ) -> set[TweetId]:
        return self._find_tweet_ids_reacted_by(user_id, tweet_ids)


class RetweetRepository(_ReactionRepository[Retweet, RetweetORM]):
    """Repository for Retweet entities."""

    orm_class = RetweetORM
    constraint = "retweet"
    unique_constraint = "uq_retweets_user_tweet"

    def __init__(self, db: Session) -> None:
        super().__init__(db, RetweetMapper())

    def find_tweet_ids_retweeted_by(
        self, user_id: UserId, tweet_ids: Collection[TweetId]
    ) -> set[TweetId]:
        return self._find_tweet_ids_reacted_by(user_id, tweet_ids)
