"""User entity for identity management."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from chirper.domain.common.entity import Entity
from chirper.domain.common.exceptions import ValidationError
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.value_objects import Email, Password, PasswordHasher, Username

# Domain constraints
MAX_DISPLAY_NAME_LENGTH = 50
MAX_BIO_LENGTH = 160
MAX_AVATAR_URL_LENGTH = 500


def _check_length(value: str | None, limit: int, field_name: str) -> None:
    if value is not None and len(value) > limit:
        raise ValidationError(
            f"{field_name} cannot exceed {limit} characters", field=field_name, value=value
        )


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing a registered account.

    Business Rules:
    - Username and email must be unique (enforced at repository level)
    - Password is held only as a hash
    - Profile fields are replaced together by update_profile
    - created_at never changes; updated_at moves on every mutation
    """

    id: UserId
    username: Username
    email: Email
    password: Password
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate invariants."""
        _check_length(self.display_name, MAX_DISPLAY_NAME_LENGTH, "display_name")
        _check_length(self.bio, MAX_BIO_LENGTH, "bio")
        _check_length(self.avatar_url, MAX_AVATAR_URL_LENGTH, "avatar_url")

    def verify_password(self, plain_password: str | None) -> bool:
        """Check a plaintext password against this user's hash."""
        return self.password.matches(plain_password)

    def update_profile(
        self,
        display_name: str | None,
        bio: str | None,
        avatar_url: str | None,
    ) -> None:
        """
        Replace all profile fields at once.

        Omitted values become None; pass the current value to keep it.

        Raises:
            ValidationError: If a field exceeds its length limit
        """
        _check_length(display_name, MAX_DISPLAY_NAME_LENGTH, "display_name")
        _check_length(bio, MAX_BIO_LENGTH, "bio")
        _check_length(avatar_url, MAX_AVATAR_URL_LENGTH, "avatar_url")

        self.display_name = display_name
        self.bio = bio
        self.avatar_url = avatar_url
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(
        cls,
        username: Username,
        email: Email,
        plain_password: str,
        hasher: PasswordHasher,
    ) -> "User":
        """
        Create a new user, hashing the password.

        Args:
            username: Validated username
            email: Validated email
            plain_password: Plaintext password (hashed here, never kept)
            hasher: Password hashing primitive

        Returns:
            New User instance

        Raises:
            ValidationError: If the password is blank or too short
        """
        now = datetime.now(UTC)
        return cls(
            id=UserId.generate(),
            username=username,
            email=email,
            password=Password.from_plain_text(plain_password, hasher),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: UserId,
        username: Username,
        email: Email,
        password: Password,
        display_name: str | None,
        bio: str | None,
        avatar_url: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence with an already-hashed password."""
        return cls(
            id=id,
            username=username,
            email=email,
            password=password,
            display_name=display_name,
            bio=bio,
            avatar_url=avatar_url,
            created_at=created_at,
            updated_at=updated_at,
        )
