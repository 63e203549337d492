from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from tracker.application.services.tokens import JwtTokenService
from tracker.domain.users.entities import Identity
from tracker.shared.errors import AuthorizationError

SECRET = "token-test-secret"
IDENTITY = Identity(user_id="65a1f0c2b4e8d9a7c6b5a4f3", username="alice")


def _service(issued_at: datetime | None = None) -> JwtTokenService:
    return JwtTokenService(
        secret=SECRET,
        ttl=timedelta(hours=24),
        clock=(lambda: issued_at) if issued_at else None,
    )


def test_issue_and_verify_round_trip() -> None:
    service = _service()

    token = service.issue(IDENTITY)

    assert service.verify(token) == IDENTITY


def test_token_payload_carries_identity_and_expiry() -> None:
    issued_at = datetime.now(UTC).replace(microsecond=0)
    token = _service(issued_at).issue(IDENTITY)

    claims = jwt.get_unverified_claims(token)

    assert claims["userId"] == IDENTITY.user_id
    assert claims["username"] == IDENTITY.username
    assert claims["exp"] - claims["iat"] == 24 * 60 * 60


def test_token_still_valid_within_24_hours() -> None:
    token = _service(datetime.now(UTC) - timedelta(hours=23)).issue(IDENTITY)

    assert _service().verify(token) == IDENTITY


def test_expired_token_is_rejected() -> None:
    token = _service(datetime.now(UTC) - timedelta(hours=25)).issue(IDENTITY)

    with pytest.raises(AuthorizationError):
        _service().verify(token)


def test_token_signed_with_other_secret_is_rejected() -> None:
    token = JwtTokenService(secret="someone-else").issue(IDENTITY)

    with pytest.raises(AuthorizationError):
        _service().verify(token)


def test_token_without_identity_claims_is_rejected() -> None:
    token = jwt.encode({"sub": "alice"}, SECRET, algorithm="HS256")

    with pytest.raises(AuthorizationError):
        _service().verify(token)


def test_garbage_token_is_rejected() -> None:
    with pytest.raises(AuthorizationError) as exc_info:
        _service().verify("not-a-jwt")

    assert exc_info.value.to_dict() == {"error": "Invalid or expired token"}


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenService(secret="")
