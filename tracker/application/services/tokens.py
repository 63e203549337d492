# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited bearer tokens."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from tracker.domain.users.entities import Identity
from tracker.domain.users.repositories import TokenService
from tracker.shared.errors import AuthorizationError
from tracker.shared.logging import logger


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock or (lambda: datetime.now(UTC))

    def issue(self, identity: Identity) -> str:
        now = self._clock()
        claims = {
            "userId": identity.user_id,
            "username": identity.username,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.debug(f"token.verify: rejected ({type(exc).__name__})")
            raise AuthorizationError() from exc

        user_id = payload.get("userId")
        username = payload.get("username")
        if not isinstance(user_id, str) or not isinstance(username, str):
            logger.debug("token.verify: rejected (missing claims)")
            raise AuthorizationError()
        return Identity(user_id=user_id, username=username)
