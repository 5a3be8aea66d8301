"""Repository for Follow relations."""

from collections.abc import Collection

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from chirper.application.common.exceptions import DuplicateRecordError
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.social.entities.follow import Follow
from chirper.infrastructure.persistence.integrity import violates_unique_constraint
from chirper.infrastructure.persistence.models import Follow as FollowORM
from chirper.infrastructure.social.mappers.follow_mapper import FollowMapper


class FollowRepository:
    """Repository for Follow relations."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FollowMapper()

    def find_by_follower_and_followed(
        self, follower_user_id: UserId, followed_user_id: UserId
    ) -> Follow | None:
        stmt = select(FollowORM).where(
            FollowORM.follower_user_id == follower_user_id.value,
            FollowORM.followed_user_id == followed_user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_followed_user_ids(self, follower_user_id: UserId) -> list[UserId]:
        """All accounts the user follows (unpaginated, for timeline assembly)."""
        stmt = select(FollowORM.followed_user_id).where(
            FollowORM.follower_user_id == follower_user_id.value
        )
        return [UserId(value) for value in self.db.execute(stmt).scalars()]

    def find_follower_user_ids(
        self, followed_user_id: UserId, offset: int, limit: int
    ) -> list[UserId]:
        stmt = (
            select(FollowORM.follower_user_id)
            .where(FollowORM.followed_user_id == followed_user_id.value)
            .order_by(FollowORM.created_at.desc(), FollowORM.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [UserId(value) for value in self.db.execute(stmt).scalars()]

    def find_following_user_ids(
        self, follower_user_id: UserId, offset: int, limit: int
    ) -> list[UserId]:
        stmt = (
            select(FollowORM.followed_user_id)
            .where(FollowORM.follower_user_id == follower_user_id.value)
            .order_by(FollowORM.created_at.desc(), FollowORM.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [UserId(value) for value in self.db.execute(stmt).scalars()]

    def find_followed_user_ids_in(
        self, follower_user_id: UserId, target_user_ids: Collection[UserId]
    ) -> set[UserId]:
        """Subset of target_user_ids that follower_user_id follows, in one query."""
        if not target_user_ids:
            return set()

        stmt = select(FollowORM.followed_user_id).where(
            FollowORM.follower_user_id == follower_user_id.value,
            FollowORM.followed_user_id.in_([user_id.value for user_id in target_user_ids]),
        )
        return {UserId(value) for value in self.db.execute(stmt).scalars()}

    def count_followers(self, user_id: UserId) -> int:
        stmt = select(func.count()).select_from(FollowORM).where(
            FollowORM.followed_user_id == user_id.value
        )
        return self.db.execute(stmt).scalar_one()

    def count_following(self, user_id: UserId) -> int:
        stmt = select(func.count()).select_from(FollowORM).where(
            FollowORM.follower_user_id == user_id.value
        )
        return self.db.execute(stmt).scalar_one()

    def save(self, follow: Follow) -> Follow:
        """
        Insert a follow relation.

        Raises:
            DuplicateRecordError: If the pair already exists
            IntegrityError: If any other constraint fails
        """
        orm_model = self.mapper.to_orm(follow)
        self.db.add(orm_model)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            if violates_unique_constraint(e, FollowORM.__table__, "uq_follows_follower_followed"):
                raise DuplicateRecordError("follow") from e
            raise
        return self.mapper.to_domain(orm_model)

    def delete(self, follower_user_id: UserId, followed_user_id: UserId) -> None:
        stmt = delete(FollowORM).where(
            FollowORM.follower_user_id == follower_user_id.value,
            FollowORM.followed_user_id == followed_user_id.value,
        )
        self.db.execute(stmt)
