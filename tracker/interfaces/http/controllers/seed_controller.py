# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from tracker.application.use_cases.tasks import CleanupTasksUseCase, SeedTasksUseCase
from tracker.infrastructure.auth import auth_required, current_identity
from tracker.shared.logging import logger


class SeedController:
    """Destructive resets of the whole task collection.

    Any authenticated user may call these; there is no role model.
    """

    def __init__(
        self,
        *,
        seed_use_case: SeedTasksUseCase,
        cleanup_use_case: CleanupTasksUseCase,
    ) -> None:
        self._seed = seed_use_case
        self._cleanup = cleanup_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("seed", __name__, url_prefix="/api")
        bp.add_url_rule("/seed", view_func=self.seed, methods=["POST"])
        bp.add_url_rule("/cleanup", view_func=self.cleanup, methods=["DELETE"])
        return bp

    @auth_required
    def seed(self) -> tuple[Response, int]:
        identity = current_identity()
        inserted = self._seed.execute(identity)
        logger.warning(f"seed: collection reset by user={identity.username} (inserted={inserted})")
        return jsonify({"message": "Database seeded successfully", "insertedCount": inserted}), 200

    @auth_required
    def cleanup(self) -> tuple[Response, int]:
        identity = current_identity()
        deleted = self._cleanup.execute()
        logger.warning(f"cleanup: collection cleared by user={identity.username} (deleted={deleted})")
        return jsonify({"message": "All assignments deleted", "deletedCount": deleted}), 200
