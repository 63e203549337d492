# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str
    password_hash: str
    created_at: datetime

    def public_view(self) -> dict[str, Any]:
        """Serializable projection without the password hash."""

        return {
            "_id": self.id,
            "username": self.username,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(slots=True, frozen=True)
class Identity:
    """Caller identity carried inside a session token."""

    user_id: str
    username: str
