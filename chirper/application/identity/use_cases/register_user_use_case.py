"""Use case for user registration."""

import structlog

from chirper.application.common.exceptions import DuplicateRecordError
from chirper.application.common.unit_of_work import UnitOfWork
from chirper.application.identity.protocols.user_repository import UserRepositoryProtocol
from chirper.domain.identity.entities.user import User
from chirper.domain.identity.exceptions import DuplicateEmailError, DuplicateUsernameError
from chirper.domain.identity.value_objects import Email, PasswordHasher, Username

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_hasher: PasswordHasher,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.unit_of_work = unit_of_work

    def register_user(self, username: str, email: str, password: str) -> User:
        """
        Register a new user account.

        Args:
            username: Desired username
            email: User's email address
            password: User's plain text password (will be hashed)

        Returns:
            Created user

        Raises:
            ValidationError: If username, email or password is malformed
            DuplicateUsernameError: If username is already taken
            DuplicateEmailError: If email is already registered
        """
        username_vo = Username(username)
        email_vo = Email(email)

        if self.user_repository.find_by_username(username_vo) is not None:
            raise DuplicateUsernameError(username_vo.value)
        if self.user_repository.find_by_email(email_vo) is not None:
            raise DuplicateEmailError(email_vo.value)

        user = User.create(username_vo, email_vo, password, self.password_hasher)

        with self.unit_of_work:
            try:
                user = self.user_repository.save(user)
            except DuplicateRecordError as e:
                # Lost a race with a concurrent registration
                if e.constraint == "email":
                    raise DuplicateEmailError(email_vo.value) from e
                raise DuplicateUsernameError(username_vo.value) from e
            self.unit_of_work.commit()

        logger.info("user_registered", user_id=str(user.id), username=user.username.value)

        return user
