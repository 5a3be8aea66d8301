from .email import Email
from .password import Password, PasswordHasher
from .username import Username

__all__ = [
    "Email",
    "Password",
    "PasswordHasher",
    "Username",
]
