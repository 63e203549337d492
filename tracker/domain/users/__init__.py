from .entities import Identity, User
from .exceptions import (
    InvalidCredentialsError,
    PasswordTooShortError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "Identity",
    "InvalidCredentialsError",
    "PasswordHasher",
    "PasswordTooShortError",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
