# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from tracker.domain.tasks.exceptions import InvalidTaskIdError
from tracker.domain.tasks.repositories import TaskRepository

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def require_task_id(tasks: TaskRepository, task_id: str) -> str:
    if not tasks.is_valid_id(task_id):
        raise InvalidTaskIdError(context={"id": task_id})
    return task_id
