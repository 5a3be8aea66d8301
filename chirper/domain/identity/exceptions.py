"""Identity domain exceptions."""

from chirper.domain.common.exceptions import (
    AuthenticationError,
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_ref: object) -> None:
        super().__init__("User", user_ref)


class DuplicateUsernameError(ConflictError):
    """Raised when attempting to register with a username that already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username {username} is already taken", {"username": username})
        self.username = username


class DuplicateEmailError(ConflictError):
    """Raised when attempting to register with an email that already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already registered", {"email": email})
        self.email = email


class AuthenticationFailedError(AuthenticationError):
    """
    Raised when login fails.

    The message is identical for an unknown username and a wrong password.
    """

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class WeakSecretError(ValidationError):
    """Raised when the token signing secret is missing or too short."""

    def __init__(self, min_bytes: int) -> None:
        super().__init__(f"Signing secret must be at least {min_bytes} bytes", field="secret_key")
