# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tracker.domain.tasks.exceptions import TaskNotFoundError
from tracker.domain.tasks.repositories import TaskRepository
from tracker.domain.users.entities import Identity

from .common import Clock, require_task_id, utc_now

UPDATABLE_FIELDS = ("title", "course")


class UpdateTaskUseCase:
    def __init__(self, *, tasks: TaskRepository, clock: Clock | None = None) -> None:
        self._tasks = tasks
        self._clock = clock or utc_now

    def execute(self, identity: Identity, task_id: str, changes: dict[str, str]) -> int:
        require_task_id(self._tasks, task_id)
        allowed = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
        outcome = self._tasks.update(
            task_id,
            allowed,
            updated_by=identity.username,
            updated_at=self._clock(),
        )
        if outcome.matched_count == 0:
            raise TaskNotFoundError(context={"id": task_id})
        return outcome.modified_count
