# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation
from .tasks import Task, TaskStatus
from .users import Identity, User

__all__ = [
    "Identity",
    "InvariantViolation",
    "Task",
    "TaskStatus",
    "User",
]
