from .get_user_profile_use_case import GetUserProfileUseCase, UserProfileResult
from .login_user_use_case import LoginResult, LoginUserUseCase
from .register_user_use_case import RegisterUserUseCase
from .update_profile_use_case import UpdateProfileUseCase

__all__ = [
    "GetUserProfileUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateProfileUseCase",
    "UserProfileResult",
]
