# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from tracker.domain.users.entities import Identity, User
from tracker.domain.users.exceptions import InvalidCredentialsError
from tracker.domain.users.repositories import PasswordHasher, TokenService, UserRepository


@dataclass(slots=True, frozen=True)
class LoginResult:
    user: User
    token: str


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> LoginResult:
        user = self._users.find_by_username(username)
        password_valid = user is not None and self._password_hasher.verify(
            password, user.password_hash
        )

        if not password_valid:
            raise InvalidCredentialsError()

        token = self._tokens.issue(Identity(user_id=user.id, username=user.username))
        return LoginResult(user=user, token=token)
