# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tracker.domain.tasks.entities import Task
from tracker.domain.tasks.repositories import TaskRepository
from tracker.domain.users.entities import Identity

from .common import Clock, utc_now


class CreateTaskUseCase:
    def __init__(self, *, tasks: TaskRepository, clock: Clock | None = None) -> None:
        self._tasks = tasks
        self._clock = clock or utc_now

    def execute(self, identity: Identity, *, title: str, course: str = "") -> Task:
        task = Task.new(
            title=title,
            course=course,
            created_by=identity.username,
            created_at=self._clock(),
        )
        return self._tasks.add(task)
