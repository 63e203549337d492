# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tracker.domain.tasks.entities import Task
from tracker.domain.tasks.repositories import TaskRepository


class ListTasksUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self) -> list[Task]:
        """Return every task, most recently created first."""

        return self._tasks.list_recent()
