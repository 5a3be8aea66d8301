"""Use case for user profile management."""

import structlog

from chirper.application.common.unit_of_work import UnitOfWork
from chirper.application.identity.protocols.user_repository import UserRepositoryProtocol
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.entities.user import User
from chirper.domain.identity.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class UpdateProfileUseCase:
    """Use case for profile updates."""

    def __init__(self, user_repository: UserRepositoryProtocol, unit_of_work: UnitOfWork) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.unit_of_work = unit_of_work

    def update_profile(
        self,
        user_id: UserId,
        display_name: str | None,
        bio: str | None,
        avatar_url: str | None,
    ) -> User:
        """
        Replace the user's profile fields.

        All three fields are replaced; None clears a field.

        Raises:
            UserNotFoundError: If user is not found
            ValidationError: If a field is too long
        """
        with self.unit_of_work:
            user = self.user_repository.find_by_id(user_id)
            if not user:
                raise UserNotFoundError(user_id)

            user.update_profile(display_name, bio, avatar_url)
            user = self.user_repository.save(user)
            self.unit_of_work.commit()

        logger.info("user_profile_updated", user_id=str(user_id))

        return user
