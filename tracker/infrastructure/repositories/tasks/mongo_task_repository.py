# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection

from tracker.domain.exceptions import InvariantViolation
from tracker.domain.tasks.entities import Task, TaskStatus, UpdateOutcome
from tracker.domain.tasks.repositories import TaskRepository
from tracker.infrastructure.db import TASKS_COLLECTION, MongoStore, store_errors
from tracker.shared.logging import logger

# Stored documents created before the status field existed lack ``completed``.
_CURRENT_COMPLETED = {"$ifNull": ["$completed", False]}


def _to_task(doc: dict[str, Any]) -> Task:
    completed = bool(doc.get("completed", False))
    return Task(
        id=str(doc["_id"]),
        title=doc["title"],
        # Early seed data stored the course under ``class``.
        course=doc.get("course") or doc.get("class") or "",
        created_by=doc.get("createdBy", ""),
        created_at=doc["createdAt"],
        completed=completed,
        status=TaskStatus.for_completed(completed),
        updated_by=doc.get("updatedBy"),
        updated_at=doc.get("updatedAt"),
    )


def _to_document(task: Task) -> dict[str, Any]:
    return {
        "title": task.title,
        "course": task.course,
        "completed": task.completed,
        "status": str(task.status),
        "createdBy": task.created_by,
        "createdAt": task.created_at,
    }


def toggle_pipeline(updated_by: str, updated_at: datetime) -> list[dict[str, Any]]:
    """Aggregation-pipeline update inverting ``completed`` with its ``status``.

    Expressions inside one ``$set`` stage all read the pre-update document.
    """
    return [
        {
            "$set": {
                "completed": {"$not": [_CURRENT_COMPLETED]},
                "status": {
                    "$cond": [
                        _CURRENT_COMPLETED,
                        str(TaskStatus.PENDING),
                        str(TaskStatus.COMPLETED),
                    ]
                },
                "updatedBy": {"$literal": updated_by},
                "updatedAt": updated_at,
            }
        }
    ]


class MongoTaskRepository(TaskRepository):
    def __init__(self, store: MongoStore) -> None:
        self._store = store

    @property
    def _tasks(self) -> Collection[dict[str, Any]]:
        return self._store.collection(TASKS_COLLECTION)

    def is_valid_id(self, task_id: str) -> bool:
        return ObjectId.is_valid(task_id)

    def add(self, task: Task) -> Task:
        doc = _to_document(task)
        with store_errors("Create assignment"):
            result = self._tasks.insert_one(doc)
        doc["_id"] = result.inserted_id
        return _to_task(doc)

    def list_recent(self) -> list[Task]:
        with store_errors("List assignments"):
            docs = list(self._tasks.find({}).sort("createdAt", DESCENDING))

        tasks: list[Task] = []
        for doc in docs:
            try:
                tasks.append(_to_task(doc))
            except (KeyError, InvariantViolation) as exc:
                logger.warning(f"tasks.list: skipping malformed record _id={doc.get('_id')} ({exc!r})")
        return tasks

    def update(
        self,
        task_id: str,
        changes: dict[str, str],
        *,
        updated_by: str,
        updated_at: datetime,
    ) -> UpdateOutcome:
        fields = {**changes, "updatedBy": updated_by, "updatedAt": updated_at}
        with store_errors("Update assignment"):
            result = self._tasks.update_one({"_id": ObjectId(task_id)}, {"$set": fields})
        return UpdateOutcome(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )

    def delete(self, task_id: str) -> int:
        with store_errors("Delete assignment"):
            result = self._tasks.delete_one({"_id": ObjectId(task_id)})
        return result.deleted_count

    def toggle(self, task_id: str, *, updated_by: str, updated_at: datetime) -> Task | None:
        with store_errors("Toggle assignment"):
            doc = self._tasks.find_one_and_update(
                {"_id": ObjectId(task_id)},
                toggle_pipeline(updated_by, updated_at),
                return_document=ReturnDocument.AFTER,
            )
        return _to_task(doc) if doc else None

    def replace_all(self, tasks: Sequence[Task]) -> int:
        with store_errors("Seed"):
            self._tasks.delete_many({})
            if not tasks:
                return 0
            result = self._tasks.insert_many([_to_document(task) for task in tasks])
        return len(result.inserted_ids)

    def delete_all(self) -> int:
        with store_errors("Cleanup"):
            result = self._tasks.delete_many({})
        return result.deleted_count
