# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from tracker.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from tracker.application.use_cases.users.login_user import LoginUserUseCase
from tracker.application.use_cases.users.register_user import RegisterUserUseCase
from tracker.infrastructure.auth import auth_required, current_identity
from tracker.interfaces.http.dto.auth import (
    CREDENTIALS_REQUIRED,
    CredentialsDTO,
    LoginResponseDTO,
    RegisterResponseDTO,
    UserSummaryDTO,
)
from tracker.shared.errors.validation import raise_validation_error
from tracker.shared.logging import logger


def _read_credentials() -> CredentialsDTO:
    try:
        return CredentialsDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc, CREDENTIALS_REQUIRED)


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._current_user_use_case = current_user_use_case

    def register(self) -> tuple[Response, int]:
        dto = _read_credentials()
        user = self._register_use_case.execute(dto.username, dto.password)

        payload = RegisterResponseDTO(userId=user.id, username=user.username).model_dump()
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        dto = _read_credentials()
        try:
            result = self._login_use_case.execute(dto.username, dto.password)
        except Exception:
            logger.info(f"auth.login: failed username={dto.username}")
            raise

        payload = LoginResponseDTO(
            token=result.token,
            user=UserSummaryDTO(id=result.user.id, username=result.user.username),
        ).model_dump()
        logger.info(f"auth.login: ok username={dto.username}")
        return jsonify(payload), 200

    @auth_required
    def me(self) -> tuple[Response, int]:
        user = self._current_user_use_case.execute(current_identity())
        return jsonify({"user": user.public_view()}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
