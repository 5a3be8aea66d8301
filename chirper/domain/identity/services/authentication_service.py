"""
Authentication domain service.

Verifies credentials and issues/validates signed bearer tokens (JWT, HS256).
Token validation entry points never raise: any failure yields None so the
caller has a single unauthenticated path regardless of the cause.
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import structlog
from jwt import InvalidTokenError

from chirper.domain.common.exceptions import ValidationError
from chirper.domain.common.value_objects.ids import UserId
from chirper.domain.identity.entities.user import User
from chirper.domain.identity.exceptions import WeakSecretError

logger = structlog.get_logger(__name__)

ALGORITHM = "HS256"
# HS256 needs a key at least as long as its digest
MIN_SECRET_BYTES = 32
DEFAULT_TOKEN_TTL = timedelta(hours=1)
REQUIRED_CLAIMS = ["sub", "iat", "exp"]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class AuthenticationService:
    """Password verification plus bearer token issuance and validation."""

    def __init__(
        self,
        secret_key: str,
        token_ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """
        Args:
            secret_key: Signing secret, at least MIN_SECRET_BYTES bytes of UTF-8
            token_ttl: Lifetime of issued tokens
            clock: Source of the current time

        Raises:
            WeakSecretError: If the secret is blank or too short
        """
        if secret_key is None or not secret_key.strip():
            raise WeakSecretError(MIN_SECRET_BYTES)
        if len(secret_key.encode("utf-8")) < MIN_SECRET_BYTES:
            raise WeakSecretError(MIN_SECRET_BYTES)
        self._secret_key = secret_key
        self.token_ttl = token_ttl
        self._clock = clock

    def authenticate(self, user: User | None, plain_password: str | None) -> bool:
        """Return True if the password matches the user's hash; never raises."""
        if user is None or plain_password is None:
            return False
        return user.verify_password(plain_password)

    def issue_token(self, user_id: UserId) -> str:
        """
        Create a signed token for a user.

        The token carries the subject, the issue time and an expiry exactly
        token_ttl later. A random jti keeps tokens issued within the same
        second distinct.
        """
        issued_at = self._clock()
        payload = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.token_ttl,
            "jti": uuid4().hex,
        }
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    def validate_token(self, token: str | None) -> UserId | None:
        """Return the subject of a valid, unexpired token, otherwise None."""
        payload = self._decode(token)
        if payload is None:
            return None
        try:
            return UserId.parse(str(payload["sub"]))
        except ValidationError:
            logger.debug("token_subject_invalid")
            return None

    def get_expiration_time(self, token: str | None) -> datetime | None:
        """Return the expiry instant of a valid, unexpired token, otherwise None."""
        payload = self._decode(token)
        if payload is None:
            return None
        return datetime.fromtimestamp(int(payload["exp"]), UTC)  # type: ignore[call-overload]

    def _decode(self, token: str | None) -> dict[str, object] | None:
        if token is None or not token.strip():
            return None
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                options={"require": REQUIRED_CLAIMS},
            )
        except (InvalidTokenError, ValueError, TypeError) as e:
            logger.debug("token_rejected", reason=type(e).__name__)
            return None
