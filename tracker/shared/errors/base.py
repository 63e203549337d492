# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    message: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        message: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_message = message or cast(str, getattr(self, "message", "Request failed"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(message=resolved_message, status=resolved_status, context=context)


class ValidationError(AppError):
    def __init__(
        self,
        message: str = "Invalid request",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status=HTTPStatus.BAD_REQUEST,
            context=context,
        )


class AuthenticationError(AppError):
    def __init__(self, message: str = "Access token required") -> None:
        super().__init__(message=message, status=HTTPStatus.UNAUTHORIZED)


class AuthorizationError(AppError):
    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message=message, status=HTTPStatus.FORBIDDEN)


class NotFoundError(AppError):
    def __init__(
        self,
        message: str = "Not found",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, status=HTTPStatus.NOT_FOUND, context=context)


class StoreError(AppError):
    def __init__(
        self,
        message: str = "Database error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            context=context,
        )
