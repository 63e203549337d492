# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import replace
from typing import Any

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from tracker.domain.users.entities import User
from tracker.domain.users.exceptions import UserAlreadyExistsError
from tracker.domain.users.repositories import UserRepository
from tracker.infrastructure.db import USERS_COLLECTION, MongoStore, store_errors


def _to_user(doc: dict[str, Any]) -> User:
    return User(
        id=str(doc["_id"]),
        username=doc["username"],
        password_hash=doc["passwordHash"],
        created_at=doc["createdAt"],
    )


class MongoUserRepository(UserRepository):
    def __init__(self, store: MongoStore) -> None:
        self._store = store

    @property
    def _users(self) -> Collection[dict[str, Any]]:
        return self._store.collection(USERS_COLLECTION)

    def find_by_username(self, username: str) -> User | None:
        with store_errors("User lookup"):
            doc = self._users.find_one({"username": username})
        return _to_user(doc) if doc else None

    def find_by_id(self, user_id: str) -> User | None:
        if not ObjectId.is_valid(user_id):
            return None
        with store_errors("User lookup"):
            doc = self._users.find_one({"_id": ObjectId(user_id)})
        return _to_user(doc) if doc else None

    def add(self, user: User) -> User:
        doc = {
            "username": user.username,
            "passwordHash": user.password_hash,
            "createdAt": user.created_at,
        }
        with store_errors("Registration"):
            try:
                result = self._users.insert_one(doc)
            except DuplicateKeyError as exc:
                raise UserAlreadyExistsError() from exc
        return replace(user, id=str(result.inserted_id))
