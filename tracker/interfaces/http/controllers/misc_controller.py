# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, send_from_directory

from tracker.infrastructure.db import MongoStore
from tracker.infrastructure.health import check_database


class MiscController:
    def __init__(self, *, store: MongoStore) -> None:
        self._store = store

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return send_from_directory(current_app.static_folder, "index.html")

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database(self._store)
            status["database"] = "ok"
        except Exception as exc:
            status["ok"] = False
            status["database"] = f"error: {exc}"
            return jsonify(status), 503
        return jsonify(status)
