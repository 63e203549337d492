# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tracker.domain.tasks.entities import Task
from tracker.domain.tasks.exceptions import TaskNotFoundError
from tracker.domain.tasks.repositories import TaskRepository
from tracker.domain.users.entities import Identity

from .common import Clock, require_task_id, utc_now


class ToggleTaskUseCase:
    """Flip ``completed`` and its paired ``status`` in one store write."""

    def __init__(self, *, tasks: TaskRepository, clock: Clock | None = None) -> None:
        self._tasks = tasks
        self._clock = clock or utc_now

    def execute(self, identity: Identity, task_id: str) -> Task:
        require_task_id(self._tasks, task_id)
        task = self._tasks.toggle(
            task_id,
            updated_by=identity.username,
            updated_at=self._clock(),
        )
        if task is None:
            raise TaskNotFoundError(context={"id": task_id})
        return task
