from .entities import Task, TaskStatus, UpdateOutcome
from .exceptions import InvalidTaskIdError, TaskNotFoundError
from .repositories import TaskRepository

__all__ = [
    "InvalidTaskIdError",
    "Task",
    "TaskNotFoundError",
    "TaskRepository",
    "TaskStatus",
    "UpdateOutcome",
]
