# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Task records tracked per class assignment."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from tracker.domain.exceptions import InvariantViolation


class TaskStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def for_completed(cls, completed: bool) -> TaskStatus:
        return cls.COMPLETED if completed else cls.PENDING


@dataclass(slots=True, frozen=True)
class Task:
    """A single assignment owned by the task store."""

    id: str
    title: str
    course: str
    created_by: str
    created_at: datetime
    completed: bool = False
    status: TaskStatus = TaskStatus.PENDING
    updated_by: str | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.title:
            raise InvariantViolation("title must not be empty", field="title")
        if TaskStatus.for_completed(self.completed) is not TaskStatus(self.status):
            raise InvariantViolation("status must match completed flag", field="status")

    @classmethod
    def new(cls, *, title: str, course: str, created_by: str, created_at: datetime) -> Task:
        return cls(
            id="",
            title=title,
            course=course,
            created_by=created_by,
            created_at=created_at,
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "_id": self.id,
            "title": self.title,
            "course": self.course,
            "completed": self.completed,
            "status": str(self.status),
            "createdBy": self.created_by,
            "createdAt": self.created_at.isoformat(),
        }
        if self.updated_by is not None:
            payload["updatedBy"] = self.updated_by
        if self.updated_at is not None:
            payload["updatedAt"] = self.updated_at.isoformat()
        return payload


@dataclass(slots=True, frozen=True)
class UpdateOutcome:

    matched_count: int
    modified_count: int
