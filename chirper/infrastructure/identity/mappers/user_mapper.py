"""Mapper for User ORM <-> Domain conversion."""

from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.entities.user import User
from chirper.domain.identity.value_objects import Email, Password, PasswordHasher, Username
from chirper.infrastructure.common.time import as_utc
from chirper.infrastructure.persistence.models import User as UserORM


class UserMapper:
    """Mapper for User ORM <-> Domain conversion."""

    def __init__(self, password_hasher: PasswordHasher) -> None:
        self.password_hasher = password_hasher

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.reconstruct(
            id=UserId(orm_model.id),
            username=Username(orm_model.username),
            email=Email(orm_model.email),
            password=Password(orm_model.password_hash, self.password_hasher),
            display_name=orm_model.display_name,
            bio=orm_model.bio,
            avatar_url=orm_model.avatar_url,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; id, username and created_at never change
            orm_model.email = domain_entity.email.value
            orm_model.password_hash = domain_entity.password.hashed_value
            orm_model.display_name = domain_entity.display_name
            orm_model.bio = domain_entity.bio
            orm_model.avatar_url = domain_entity.avatar_url
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return UserORM(
            id=domain_entity.id.value,
            username=domain_entity.username.value,
            email=domain_entity.email.value,
            password_hash=domain_entity.password.hashed_value,
            display_name=domain_entity.display_name,
            bio=domain_entity.bio,
            avatar_url=domain_entity.avatar_url,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
