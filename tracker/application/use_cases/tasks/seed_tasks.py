# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Sample data reset for classroom demos.

Seeding clears the collection and then inserts the samples as two separate
store calls. If the insert fails the collection stays empty.
"""

from __future__ import annotations

from datetime import datetime

from tracker.domain.tasks.entities import Task
from tracker.domain.tasks.repositories import TaskRepository
from tracker.domain.users.entities import Identity

from .common import Clock, utc_now

SAMPLE_ASSIGNMENTS: tuple[tuple[str, str], ...] = (
    ("Create Mini App", "CIS-486"),
    ("Simulation Scenario D", "MG-395"),
    ("Read Chapters 7-8", "CIS-476"),
)


def build_sample_tasks(created_by: str, created_at: datetime) -> list[Task]:
    return [
        Task.new(title=title, course=course, created_by=created_by, created_at=created_at)
        for title, course in SAMPLE_ASSIGNMENTS
    ]


class SeedTasksUseCase:
    def __init__(self, *, tasks: TaskRepository, clock: Clock | None = None) -> None:
        self._tasks = tasks
        self._clock = clock or utc_now

    def execute(self, identity: Identity) -> int:
        samples = build_sample_tasks(identity.username, self._clock())
        return self._tasks.replace_all(samples)


class CleanupTasksUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self) -> int:
        return self._tasks.delete_all()
