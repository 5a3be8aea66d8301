from .user_repository import UserRepositoryProtocol

__all__ = [
    "UserRepositoryProtocol",
]
