"""Mapper for Follow ORM <-> Domain conversion."""

from chirper.domain.common.value_objects.ids import FollowId, UserId
from chirper.domain.social.entities.follow import Follow
from chirper.infrastructure.common.time import as_utc
from chirper.infrastructure.persistence.models import Follow as FollowORM


class FollowMapper:
    def to_domain(self, orm_model: FollowORM) -> Follow:
        return Follow.reconstruct(
            id=FollowId(orm_model.id),
            follower_user_id=UserId(orm_model.follower_user_id),
            followed_user_id=UserId(orm_model.followed_user_id),
            created_at=as_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: Follow) -> FollowORM:
        return FollowORM(
            id=domain_entity.id.value,
            follower_user_id=domain_entity.follower_user_id.value,
            followed_user_id=domain_entity.followed_user_id.value,
            created_at=domain_entity.created_at,
        )
