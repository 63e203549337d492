from .auth import CREDENTIALS_REQUIRED, CredentialsDTO, LoginResponseDTO, RegisterResponseDTO
from .tasks import (
    COURSE_INVALID,
    INVALID_UPDATE,
    TITLE_REQUIRED,
    TaskCreateDTO,
    TaskUpdateDTO,
    create_error_message,
)

__all__ = [
    "COURSE_INVALID",
    "CREDENTIALS_REQUIRED",
    "INVALID_UPDATE",
    "TITLE_REQUIRED",
    "CredentialsDTO",
    "LoginResponseDTO",
    "RegisterResponseDTO",
    "TaskCreateDTO",
    "TaskUpdateDTO",
    "create_error_message",
]
