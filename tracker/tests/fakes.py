from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime, timedelta

from bson import ObjectId

from tracker.domain.tasks.entities import Task, TaskStatus, UpdateOutcome
from tracker.domain.tasks.repositories import TaskRepository
from tracker.domain.users.entities import User
from tracker.domain.users.exceptions import UserAlreadyExistsError
from tracker.domain.users.repositories import PasswordHasher, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        if self.find_by_username(user.username) is not None:
            raise UserAlreadyExistsError()
        persisted = replace(user, id=str(ObjectId()))
        self._users[persisted.id] = persisted
        return persisted


class InMemoryTaskRepository(TaskRepository):
    """Task store whose writes are atomic per call, like single-document writes."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = threading.Lock()
        self.toggle_calls = 0

    def is_valid_id(self, task_id: str) -> bool:
        return ObjectId.is_valid(task_id)

    def add(self, task: Task) -> Task:
        persisted = replace(task, id=str(ObjectId()))
        with self._lock:
            self._tasks[persisted.id] = persisted
        return persisted

    def get(self, task_id: str) -> Task | None:
        return self._tasks.get(task_id)

    def list_recent(self) -> list[Task]:
        return sorted(self._tasks.values(), key=lambda t: t.created_at, reverse=True)

    def update(
        self,
        task_id: str,
        changes: dict[str, str],
        *,
        updated_by: str,
        updated_at: datetime,
    ) -> UpdateOutcome:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return UpdateOutcome(matched_count=0, modified_count=0)
            self._tasks[task_id] = replace(
                task, **changes, updated_by=updated_by, updated_at=updated_at
            )
        return UpdateOutcome(matched_count=1, modified_count=1)

    def delete(self, task_id: str) -> int:
        with self._lock:
            return 1 if self._tasks.pop(task_id, None) is not None else 0

    def toggle(self, task_id: str, *, updated_by: str, updated_at: datetime) -> Task | None:
        with self._lock:
            self.toggle_calls += 1
            task = self._tasks.get(task_id)
            if task is None:
                return None
            completed = not task.completed
            toggled = replace(
                task,
                completed=completed,
                status=TaskStatus.for_completed(completed),
                updated_by=updated_by,
                updated_at=updated_at,
            )
            self._tasks[task_id] = toggled
            return toggled

    def replace_all(self, tasks: Sequence[Task]) -> int:
        with self._lock:
            self._tasks.clear()
        for task in tasks:
            self.add(task)
        return len(tasks)

    def delete_all(self) -> int:
        with self._lock:
            count = len(self._tasks)
            self._tasks.clear()
        return count


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class FakeStore:
    def __init__(self, *, healthy: bool = True) -> None:
        self.healthy = healthy
        self.connected = False
        self.closed = False

    @property
    def available(self) -> bool:
        return self.connected

    def connect(self) -> bool:
        self.connected = self.healthy
        return self.connected

    def ping(self) -> None:
        if not self.healthy:
            raise RuntimeError("ping failed")

    def close(self) -> None:
        self.closed = True


class TickingClock:
    """Returns a strictly increasing UTC time on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self._now = start or datetime(2025, 1, 1, tzinfo=UTC)
        self._step = step

    def __call__(self) -> datetime:
        self._now += self._step
        return self._now
