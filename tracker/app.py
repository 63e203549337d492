# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import atexit

from flask import Flask
from flask_cors import CORS

from tracker.container import Container
from tracker.infrastructure.auth import EXTENSION_KEY
from tracker.shared.config import AppConfig, load_config
from tracker.shared.logging import logger, setup_logging
from tracker.shared.middleware.error_handler import configure_error_handling
from tracker.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    if config is None:
        config = container.config if container is not None else load_config()
    if container is None:
        container = Container(config)

    setup_logging(debug_mode=config.debug_logging)

    app = Flask(__name__, static_folder="static")
    app.json.sort_keys = False  # type: ignore[attr-defined]
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    CORS(app, resources={r"/api/*": {"origins": config.security.allowed_origins}})

    if not container.store.connect():
        logger.error("Document store unavailable; store-backed endpoints will answer 500")

    app.extensions[EXTENSION_KEY] = container
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.tasks_controller.as_blueprint())
    app.register_blueprint(container.seed_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    container: Container = app.extensions[EXTENSION_KEY]
    atexit.register(container.store.close)
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
