# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Salted password hashes stored on user records."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from tracker.domain.users.repositories import PasswordHasher
from tracker.shared.logging import logger

DEFAULT_METHOD = "scrypt"


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = DEFAULT_METHOD) -> None:
        self._method = method

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method)

    def verify(self, password: str, hashed: str) -> bool:
        """A stored hash that cannot be parsed never matches."""
        if not hashed:
            return False
        try:
            return check_password_hash(hashed, password)
        except ValueError as exc:
            logger.warning(f"auth.verify: unreadable password hash ({exc})")
            return False
