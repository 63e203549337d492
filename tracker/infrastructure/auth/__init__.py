# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps

from flask import current_app, g, request

from tracker.domain.users.entities import Identity
from tracker.domain.users.repositories import TokenService
from tracker.shared.errors import AuthenticationError
from tracker.shared.logging import logger

EXTENSION_KEY = "tracker"


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth[7:].strip()
    return ""


def _token_service() -> TokenService:
    return current_app.extensions[EXTENSION_KEY].token_service


def auth_required(f):
    """Reject the request unless it carries a valid bearer token.

    Missing token -> 401, invalid or expired token -> 403. On success the
    decoded identity is available through ``current_identity()``.
    """

    @wraps(f)
    def inner(*a, **kw):
        token = bearer_token()
        if not token:
            logger.warning(
                f"No bearer token on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise AuthenticationError()

        try:
            identity = _token_service().verify(token)
        except Exception:
            logger.warning(f"Auth failed (token invalid/expired) on {request.method} {request.path}")
            raise

        g.identity = identity
        logger.debug(f"Auth OK: user={identity.username} {request.method} {request.path}")
        return f(*a, **kw)

    return inner


def current_identity() -> Identity:
    identity = g.get("identity")
    if identity is None:
        raise AuthenticationError()
    return identity


__all__ = ["EXTENSION_KEY", "auth_required", "bearer_token", "current_identity"]
