"""Unit tests for JWTService."""

from datetime import timedelta

import jwt
import pytest

from ceramic_catalog.infrastructure.auth import InvalidTokenError, JWTService, TokenExpiredError


@pytest.fixture
def service():
    return JWTService(secret_key="test-secret")


def test_round_trip_claims(service):
    token = service.create_access_token(
        user_id="u1", email="a@example.com", role="COLLECTION", client_id="c1"
    )

    payload = service.validate_access_token(token)

    assert payload["user_id"] == "u1"
    assert payload["role"] == "COLLECTION"
    assert payload["client_id"] == "c1"
    assert payload["iss"] == "ceramic-catalog"


def test_expired_token(service):
    token = service.create_access_token(
        user_id="u1", email="a@example.com", role="ADMIN", expires_delta=timedelta(seconds=-1)
    )

    with pytest.raises(TokenExpiredError):
        service.validate_access_token(token)


def test_wrong_secret(service):
    token = JWTService(secret_key="other-secret").create_access_token(
        user_id="u1", email="a@example.com", role="ADMIN"
    )

    with pytest.raises(InvalidTokenError):
        service.validate_access_token(token)


def test_non_access_token_rejected(service):
    token = jwt.encode(
        {"iss": JWTService.ISSUER, "type": "refresh", "user_id": "u1"},
        "test-secret",
        algorithm=JWTService.ALGORITHM,
    )

    with pytest.raises(InvalidTokenError, match="Not an access token"):
        service.validate_access_token(token)
