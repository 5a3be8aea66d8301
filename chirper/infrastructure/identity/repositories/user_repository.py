"""Repository for User domain entities."""

import logging
from collections.abc import Collection

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from chirper.application.common.exceptions import DuplicateRecordError
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.entities.user import User
from chirper.domain.identity.value_objects import Email, PasswordHasher, Username
from chirper.infrastructure.identity.mappers.user_mapper import UserMapper
from chirper.infrastructure.persistence.integrity import violates_unique_constraint
from chirper.infrastructure.persistence.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session, password_hasher: PasswordHasher) -> None:
        self.db = db
        self.mapper = UserMapper(password_hasher)

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_username(self, username: Username) -> User | None:
        stmt = select(UserORM).where(UserORM.username == username.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: Email) -> User | None:
        stmt = select(UserORM).where(UserORM.email == email.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, user_ids: Collection[UserId]) -> dict[UserId, User]:
        """Load many users in one query, keyed by id. Unknown ids are left out."""
        if not user_ids:
            return {}

        stmt = select(UserORM).where(UserORM.id.in_([user_id.value for user_id in user_ids]))
        users = (self.mapper.to_domain(row) for row in self.db.execute(stmt).scalars())
        return {user.id: user for user in users}

    def search(self, keyword: str, offset: int, limit: int) -> list[User]:
        """Users whose username or display name contains the keyword, ignoring case."""
        stmt = (
            select(UserORM)
            .where(self._matches(keyword))
            .order_by(UserORM.username)
            .offset(offset)
            .limit(limit)
        )
        return [self.mapper.to_domain(row) for row in self.db.execute(stmt).scalars()]

    def count_search(self, keyword: str) -> int:
        stmt = select(func.count()).select_from(UserORM).where(self._matches(keyword))
        return self.db.execute(stmt).scalar_one()

    def save(self, user: User) -> User:
        """
        Save a user entity.

        Args:
            user: The user entity to save

        Returns:
            Saved user entity

        Raises:
            DuplicateRecordError: If the username or email is already taken
            IntegrityError: If any other constraint fails
        """
        orm_model = self.db.get(UserORM, user.id.value)
        if orm_model:
            orm_model = self.mapper.to_orm(user, orm_model)
        else:
            orm_model = self.mapper.to_orm(user)
            self.db.add(orm_model)

        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            # Check which unique constraint fired
            for constraint in ("email", "username"):
                if violates_unique_constraint(e, UserORM.__table__, f"uq_users_{constraint}"):
                    raise DuplicateRecordError(constraint) from e
            raise

        logger.debug(f"Saved user {user.id}")
        return self.mapper.to_domain(orm_model)

    def delete(self, user_id: UserId) -> None:
        orm_model = self.db.get(UserORM, user_id.value)
        if orm_model:
            self.db.delete(orm_model)
            self.db.flush()

    @staticmethod
    def _matches(keyword: str) -> ColumnElement[bool]:
        return or_(
            UserORM.username.icontains(keyword, autoescape=True),
            UserORM.display_name.icontains(keyword, autoescape=True),
        )
