# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from tracker.domain.users.entities import User
from tracker.domain.users.exceptions import PasswordTooShortError, UserAlreadyExistsError
from tracker.domain.users.repositories import PasswordHasher, UserRepository

MIN_PASSWORD_LENGTH = 5


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._clock = clock or (lambda: datetime.now(UTC))

    def execute(self, username: str, password: str) -> User:
        if len(password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError()
        # The unique index on username still guards the window between these two calls.
        existing = self._users.find_by_username(username)
        if existing:
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        user = User(id="", username=username, password_hash=hashed, created_at=self._clock())
        return self._users.add(user)
