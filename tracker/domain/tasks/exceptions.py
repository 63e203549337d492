# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from tracker.shared.errors.base import DomainError


class InvalidTaskIdError(DomainError):
    message = "Invalid task ID"


class TaskNotFoundError(DomainError):
    message = "Assignment not found"
    status = HTTPStatus.NOT_FOUND
