from .create_task import CreateTaskUseCase
from .delete_task import DeleteTaskUseCase
from .list_tasks import ListTasksUseCase
from .seed_tasks import SAMPLE_ASSIGNMENTS, CleanupTasksUseCase, SeedTasksUseCase
from .toggle_task import ToggleTaskUseCase
from .update_task import UpdateTaskUseCase

__all__ = [
    "SAMPLE_ASSIGNMENTS",
    "CleanupTasksUseCase",
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "ListTasksUseCase",
    "SeedTasksUseCase",
    "ToggleTaskUseCase",
    "UpdateTaskUseCase",
]
