# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from tracker.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    message = "Username already exists"


class InvalidCredentialsError(DomainError):
    message = "Invalid username or password"


class PasswordTooShortError(DomainError):
    message = "Password must be at least 5 characters long"


class UserNotFoundError(DomainError):
    message = "User not found"
    status = HTTPStatus.NOT_FOUND
