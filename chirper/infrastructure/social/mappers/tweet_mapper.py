"""Mapper for Tweet ORM <-> Domain conversion."""

from chirper.domain.common.value_objects.ids import TweetId, UserId
from chirper.domain.social.entities.tweet import Tweet
from chirper.domain.social.value_objects import TweetContent
from chirper.infrastructure.common.time import as_utc
from chirper.infrastructure.persistence.models import Tweet as TweetORM


class TweetMapper:
    """Mapper for Tweet ORM <-> Domain conversion."""

    def to_domain(self, orm_model: TweetORM) -> Tweet:
        """Convert ORM model to domain entity."""
        return Tweet.reconstruct(
            id=TweetId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            content=TweetContent(orm_model.content),
            is_deleted=orm_model.is_deleted,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Tweet, orm_model: TweetORM | None = None) -> TweetORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Author and content are immutable
            orm_model.is_deleted = domain_entity.is_deleted
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return TweetORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            content=domain_entity.content.value,
            is_deleted=domain_entity.is_deleted,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
