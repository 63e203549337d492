from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError, field_validator

TITLE_REQUIRED = "Title is required"
COURSE_INVALID = "Course must be text"
INVALID_UPDATE = "Title cannot be empty and course must be text"

Title = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)]
Course = Annotated[str, StringConstraints(strict=True, strip_whitespace=True)]


class TaskCreateDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Title
    course: Course | None = ""

    @field_validator("course", mode="after")
    @classmethod
    def _default_course(cls, value: str | None) -> str:
        return value or ""


class TaskUpdateDTO(BaseModel):
    """Partial update; only fields present in the body are written."""

    model_config = ConfigDict(extra="ignore")

    title: Title | None = None
    course: Course | None = None

    def changes(self) -> dict[str, str]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


def create_error_message(exc: ValidationError) -> str:
    """A bad ``course`` alongside a valid title is reported as such."""
    if all(error["loc"][:1] == ("course",) for error in exc.errors()):
        return COURSE_INVALID
    return TITLE_REQUIRED
