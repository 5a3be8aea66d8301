"""Use case for unfollowing a user."""

import structlog

from chirper.application.common.unit_of_work import UnitOfWork
from chirper.application.social.protocols.follow_repository import FollowRepositoryProtocol
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.social.services.social_graph_service import SocialGraphService

logger = structlog.get_logger(__name__)


class UnfollowUserUseCase:
    def __init__(
        self,
        follow_repository: FollowRepositoryProtocol,
        social_graph_service: SocialGraphService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.follow_repository = follow_repository
        self.social_graph_service = social_graph_service
        self.unit_of_work = unit_of_work

    def unfollow(self, follower_user_id: UserId, followed_user_id: UserId) -> None:
        """
        Stop following a user.

        Raises:
            NotFollowingError: If the relation does not exist
        """
        self.social_graph_service.validate_unfollow(follower_user_id, followed_user_id)

        with self.unit_of_work:
            self.follow_repository.delete(follower_user_id, followed_user_id)
            self.unit_of_work.commit()

        logger.info(
            "user_unfollowed",
            follower_user_id=str(follower_user_id),
            followed_user_id=str(followed_user_id),
        )
