"""Use case for logging in with username and password."""

from dataclasses import dataclass
from datetime import datetime

import structlog

from chirper.application.identity.protocols.user_repository import UserRepositoryProtocol
from chirper.domain.common.exceptions import ValidationError
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.exceptions import AuthenticationFailedError
from chirper.domain.identity.services.authentication_service import AuthenticationService
from chirper.domain.identity.value_objects import PasswordHasher, Username

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Bearer token issued on successful login."""

    token: str
    user_id: UserId
    username: str
    expires_at: datetime | None


class LoginUserUseCase:
    """Use case for authenticating a user and issuing a token."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        authentication_service: AuthenticationService,
        password_hasher: PasswordHasher,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.authentication_service = authentication_service
        self.password_hasher = password_hasher

    def login(self, username: str, password: str) -> LoginResult:
        """
        Authenticate a user with username and password.

        Unknown usernames and wrong passwords fail with the same error, and
        both paths run one hash verification.

        Args:
            username: User's username
            password: User's plain text password

        Returns:
            LoginResult with the signed token

        Raises:
            AuthenticationFailedError: If credentials are invalid
        """
        try:
            username_vo = Username(username)
        except ValidationError:
            username_vo = None

        user = self.user_repository.find_by_username(username_vo) if username_vo else None

        if user is None:
            self.password_hasher.verify(password or "", self.password_hasher.dummy_hash())
            raise AuthenticationFailedError

        if not self.authentication_service.authenticate(user, password or ""):
            raise AuthenticationFailedError

        token = self.authentication_service.issue_token(user.id)

        logger.info("user_authenticated", user_id=str(user.id))

        return LoginResult(
            token=token,
            user_id=user.id,
            username=user.username.value,
            expires_at=self.authentication_service.get_expiration_time(token),
        )
