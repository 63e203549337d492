# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from tracker.application.use_cases.tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    ToggleTaskUseCase,
    UpdateTaskUseCase,
)
from tracker.infrastructure.auth import auth_required, current_identity
from tracker.interfaces.http.dto.tasks import (
    INVALID_UPDATE,
    TaskCreateDTO,
    TaskUpdateDTO,
    create_error_message,
)
from tracker.shared.errors.validation import raise_validation_error
from tracker.shared.logging import logger


class TasksController:
    def __init__(
        self,
        *,
        create_use_case: CreateTaskUseCase,
        list_use_case: ListTasksUseCase,
        update_use_case: UpdateTaskUseCase,
        delete_use_case: DeleteTaskUseCase,
        toggle_use_case: ToggleTaskUseCase,
    ) -> None:
        self._create = create_use_case
        self._list = list_use_case
        self._update = update_use_case
        self._delete = delete_use_case
        self._toggle = toggle_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("tasks", __name__, url_prefix="/api")
        bp.add_url_rule("/tasks", view_func=self.list_tasks, methods=["GET"])
        bp.add_url_rule("/tasks", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/tasks/<task_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/tasks/<task_id>", view_func=self.delete, methods=["DELETE"])
        bp.add_url_rule("/tasks/<task_id>/toggle", view_func=self.toggle, methods=["PATCH"])
        return bp

    @auth_required
    def list_tasks(self) -> tuple[Response, int]:
        t0 = perf_counter()
        items = self._list.execute()
        dt = (perf_counter() - t0) * 1000
        logger.info(f"tasks.list: ok (n={len(items)}, dt_ms={dt:.0f})")
        return jsonify([task.to_dict() for task in items]), 200

    @auth_required
    def create(self) -> tuple[Response, int]:
        identity = current_identity()
        try:
            dto = TaskCreateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, create_error_message(exc))

        task = self._create.execute(identity, title=dto.title, course=dto.course)
        logger.info(f"tasks.create: ok (user={identity.username}, id={task.id})")
        return (
            jsonify(
                {
                    "message": "Assignment created successfully",
                    "assignmentId": task.id,
                    "assignment": task.to_dict(),
                }
            ),
            201,
        )

    @auth_required
    def update(self, task_id: str) -> tuple[Response, int]:
        identity = current_identity()
        try:
            dto = TaskUpdateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, INVALID_UPDATE)

        modified = self._update.execute(identity, task_id, dto.changes())
        logger.info(f"tasks.update: ok (user={identity.username}, id={task_id}, modified={modified})")
        return jsonify({"message": "Assignment updated successfully", "modifiedCount": modified}), 200

    @auth_required
    def delete(self, task_id: str) -> tuple[Response, int]:
        identity = current_identity()
        deleted = self._delete.execute(task_id)
        logger.info(f"tasks.delete: ok (user={identity.username}, id={task_id})")
        return jsonify({"message": "Assignment deleted successfully", "deletedCount": deleted}), 200

    @auth_required
    def toggle(self, task_id: str) -> tuple[Response, int]:
        identity = current_identity()
        task = self._toggle.execute(identity, task_id)
        logger.info(
            f"tasks.toggle: ok (user={identity.username}, id={task_id}, completed={task.completed})"
        )
        return (
            jsonify(
                {
                    "message": "Assignment status toggled",
                    "completed": task.completed,
                    "status": str(task.status),
                }
            ),
            200,
        )
