"""Password hashing and verification with bcrypt."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.bcrypt import BcryptHasher

# bcrypt only looks at the first 72 bytes; recent bcrypt releases raise instead
# of truncating, so the cut is made here for both hashing and verification.
BCRYPT_MAX_BYTES = 72


def _prepare(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher:
    """PasswordHasher backed by pwdlib's bcrypt hasher."""

    def __init__(self, rounds: int = 10) -> None:
        self.password_hash = PasswordHash((BcryptHasher(rounds=rounds),))
        # Generate a real hash so verifying against it costs the same as a real check.
        # A fake string would make pwdlib raise UnknownHashError immediately.
        self._dummy_hash = self.password_hash.hash(
            _prepare("dummy_password_for_timing_attack_prevention")
        )

    def hash(self, plain_password: str) -> str:
        return self.password_hash.hash(_prepare(plain_password))

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self.password_hash.verify(_prepare(plain_password), hashed_password)
        except UnknownHashError:
            return False

    def dummy_hash(self) -> str:
        return self._dummy_hash
