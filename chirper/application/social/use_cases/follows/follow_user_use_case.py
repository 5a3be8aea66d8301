"""Use case for following a user."""

import structlog

from chirper.application.common.exceptions import DuplicateRecordError
from chirper.application.common.unit_of_work import UnitOfWork
from chirper.application.identity.protocols.user_repository import UserRepositoryProtocol
from chirper.application.social.protocols.follow_repository import FollowRepositoryProtocol
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.exceptions import UserNotFoundError
from chirper.domain.social.entities.follow import Follow
from chirper.domain.social.exceptions import AlreadyFollowingError
from chirper.domain.social.services.social_graph_service import SocialGraphService

logger = structlog.get_logger(__name__)


class FollowUserUseCase:
    def __init__(
        self,
        follow_repository: FollowRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
        social_graph_service: SocialGraphService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.follow_repository = follow_repository
        self.user_repository = user_repository
        self.social_graph_service = social_graph_service
        self.unit_of_work = unit_of_work

    def follow(self, follower_user_id: UserId, followed_user_id: UserId) -> Follow:
        """
        Start following a user.

        Raises:
            SelfFollowError: If the user tries to follow themselves
            AlreadyFollowingError: If the relation already exists
            UserNotFoundError: If the followed user does not exist
        """
        self.social_graph_service.validate_follow(follower_user_id, followed_user_id)

        if self.user_repository.find_by_id(followed_user_id) is None:
            raise UserNotFoundError(followed_user_id)

        follow = Follow.create(follower_user_id, followed_user_id)

        with self.unit_of_work:
            try:
                follow = self.follow_repository.save(follow)
            except DuplicateRecordError as e:
                raise AlreadyFollowingError from e
            self.unit_of_work.commit()

        logger.info(
            "user_followed",
            follower_user_id=str(follower_user_id),
            followed_user_id=str(followed_user_id),
        )
        return follow
