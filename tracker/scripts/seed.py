# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Reset the task collection to the sample assignments.

Opens its own connection, pings, reseeds and always closes again; the web
service keeps its single long-lived client instead.
"""

from __future__ import annotations

import argparse
from datetime import UTC, datetime

from tracker.application.use_cases.tasks.seed_tasks import build_sample_tasks
from tracker.infrastructure.db import TASKS_COLLECTION, MongoStore, store_errors
from tracker.infrastructure.repositories import MongoTaskRepository
from tracker.shared.config import DatabaseConfig
from tracker.shared.errors import StoreError
from tracker.shared.logging import logger, setup_logging

SEED_AUTHOR = "admin"


def seed_database(store: MongoStore, *, created_by: str = SEED_AUTHOR) -> int:
    if not store.connect():
        raise StoreError("Database not connected")

    try:
        collection = store.collection(TASKS_COLLECTION)
        with store_errors("Count assignments"):
            existing = collection.count_documents({})
        logger.info(f"seed: found {existing} existing assignments")

        samples = build_sample_tasks(created_by, datetime.now(UTC))
        inserted = MongoTaskRepository(store).replace_all(samples)
        logger.info(f"seed: inserted {inserted} assignments")
        for index, task in enumerate(samples, start=1):
            logger.info(f"seed: {index}. {task.title} - Course: {task.course}")

        for index, task in enumerate(MongoTaskRepository(store).list_recent(), start=1):
            logger.info(f"seed: in store {index}. {task.title} - Course: {task.course}")
        return inserted
    finally:
        store.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reset assignments to the sample set")
    parser.add_argument(
        "--created-by",
        default=SEED_AUTHOR,
        help="Username stamped on the sample assignments",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the sample set without touching the database",
    )
    args = parser.parse_args(argv)
    setup_logging()

    if args.dry_run:
        for task in build_sample_tasks(args.created_by, datetime.now(UTC)):
            print(f"{task.title} - Course: {task.course}")
        return 0

    try:
        seed_database(MongoStore(DatabaseConfig()), created_by=args.created_by)
    except StoreError as exc:
        logger.error(f"seed: failed ({exc.message})")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
