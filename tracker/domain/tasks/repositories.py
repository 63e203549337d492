# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from .entities import Task, UpdateOutcome


class TaskRepository(Protocol):
    def is_valid_id(self, task_id: str) -> bool: ...
    def add(self, task: Task) -> Task: ...
    def list_recent(self) -> list[Task]: ...
    def update(
        self,
        task_id: str,
        changes: dict[str, str],
        *,
        updated_by: str,
        updated_at: datetime,
    ) -> UpdateOutcome: ...
    def delete(self, task_id: str) -> int: ...
    def toggle(self, task_id: str, *, updated_by: str, updated_at: datetime) -> Task | None: ...
    def replace_all(self, tasks: Sequence[Task]) -> int: ...
    def delete_all(self) -> int: ...
