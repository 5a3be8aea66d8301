"""Identity domain layer."""

from chirper.domain.identity.entities.user import User
from chirper.domain.identity.exceptions import (
    AuthenticationFailedError,
    DuplicateEmailError,
    DuplicateUsernameError,
    UserNotFoundError,
    WeakSecretError,
)

__all__ = [
    "AuthenticationFailedError",
    "DuplicateEmailError",
    "DuplicateUsernameError",
    "User",
    "UserNotFoundError",
    "WeakSecretError",
]
