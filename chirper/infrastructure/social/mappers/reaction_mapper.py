"""Mappers for Like and Retweet ORM <-> Domain conversion."""

from chirper.domain.common.value_objects.ids import LikeId, RetweetId, TweetId, UserId
from chirper.domain.social.entities.like import Like
from chirper.domain.social.entities.retweet import Retweet
from chirper.infrastructure.common.time import as_utc
from chirper.infrastructure.persistence.models import Like as LikeORM
from chirper.infrastructure.persistence.models import Retweet as RetweetORM


class LikeMapper:
    def to_domain(self, orm_model: LikeORM) -> Like:
        return Like.reconstruct(
            id=LikeId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            tweet_id=TweetId(orm_model.tweet_id),
            created_at=as_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: Like) -> LikeORM:
        return LikeORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            tweet_id=domain_entity.tweet_id.value,
            created_at=domain_entity.created_at,
        )


class RetweetMapper:
    def to_domain(self, orm_model: RetweetORM) -> Retweet:
        return Retweet.reconstruct(
            id=RetweetId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            tweet_id=TweetId(orm_model.tweet_id),
            created_at=as_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: Retweet) -> RetweetORM:
        return RetweetORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            tweet_id=domain_entity.tweet_id.value,
            created_at=domain_entity.created_at,
        )
