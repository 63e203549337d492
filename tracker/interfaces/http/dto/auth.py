from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

CREDENTIALS_REQUIRED = "Username and password are required"

Username = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)]


class CredentialsDTO(BaseModel):
    """Body of both register and login requests."""

    model_config = ConfigDict(extra="ignore")

    username: Username
    password: Annotated[str, StringConstraints(strict=True, min_length=1)]


class UserSummaryDTO(BaseModel):
    id: str
    username: str


class RegisterResponseDTO(BaseModel):
    message: str = "User registered successfully"
    userId: str
    username: str


class LoginResponseDTO(BaseModel):
    message: str = "Login successful"
    token: str
    user: UserSummaryDTO
