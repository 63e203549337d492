# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from tracker.shared.config import DatabaseConfig
from tracker.shared.errors import StoreError
from tracker.shared.logging import logger, sanitize_message

USERS_COLLECTION = "users"
TASKS_COLLECTION = "tasks"

ClientFactory = Callable[..., MongoClient]


class MongoStore:
    """One long-lived client shared by every request in the process."""

    def __init__(
        self,
        config: DatabaseConfig,
        *,
        client_factory: ClientFactory = MongoClient,
    ) -> None:
        self._config = config
        self._client_factory = client_factory
        self._client: MongoClient | None = None
        self._database: Database | None = None

    @property
    def available(self) -> bool:
        return self._database is not None

    def connect(self) -> bool:
        """Open the client, ping it and ensure indexes.

        A failure is logged and leaves the store unavailable; callers then get
        ``StoreError`` instead of a crashed process.
        """
        if self.available:
            return True

        client: MongoClient | None = None
        try:
            client = self._client_factory(
                self._config.uri,
                serverSelectionTimeoutMS=self._config.server_selection_timeout_ms,
                tz_aware=True,
            )
            client.admin.command("ping")
            database = client[self._config.name]
            self._ensure_indexes(database)
        except PyMongoError as exc:
            logger.error(f"db.connect: failed ({exc})")
            if client is not None:
                client.close()
            return False

        self._client = client
        self._database = database
        logger.info(
            f"db.connect: ok (uri={sanitize_message(self._config.uri)}, db={self._config.name})"
        )
        return True

    @staticmethod
    def _ensure_indexes(database: Database) -> None:
        database[USERS_COLLECTION].create_index([("username", ASCENDING)], unique=True)
        database[TASKS_COLLECTION].create_index([("createdAt", DESCENDING)])

    def collection(self, name: str) -> Collection[dict[str, Any]]:
        if self._database is None:
            raise StoreError("Database not connected")
        return self._database[name]

    def ping(self) -> None:
        if self._client is None:
            raise StoreError("Database not connected")
        with store_errors("Ping"):
            self._client.admin.command("ping")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("db.close: connection closed")
        self._client = None
        self._database = None


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Re-raise driver failures as ``StoreError`` naming the failed action."""
    try:
        yield
    except PyMongoError as exc:
        logger.error(f"db.{action.lower().replace(' ', '_')}: err ({exc})")
        raise StoreError(f"{action} failed: {exc}") from exc
