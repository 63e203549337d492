# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.tasks import (
    CleanupTasksUseCase,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    SeedTasksUseCase,
    ToggleTaskUseCase,
    UpdateTaskUseCase,
)
from .use_cases.users.get_current_user import GetCurrentUserUseCase
from .use_cases.users.login_user import LoginResult, LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "CleanupTasksUseCase",
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "GetCurrentUserUseCase",
    "ListTasksUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "SeedTasksUseCase",
    "ToggleTaskUseCase",
    "UpdateTaskUseCase",
]
