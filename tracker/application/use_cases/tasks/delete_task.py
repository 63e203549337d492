# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tracker.domain.tasks.exceptions import TaskNotFoundError
from tracker.domain.tasks.repositories import TaskRepository

from .common import require_task_id


class DeleteTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, task_id: str) -> int:
        require_task_id(self._tasks, task_id)
        deleted = self._tasks.delete(task_id)
        if deleted == 0:
            raise TaskNotFoundError(context={"id": task_id})
        return deleted
