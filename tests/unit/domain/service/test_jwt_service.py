"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from topmeup.config import AuthSettings
from topmeup.domain.service import JWTService
from topmeup.domain.value import UserId
from topmeup.util.jwt import JWTError, create_token


@pytest.fixture
def settings():
    return AuthSettings(jwt_secret="test-secret-with-at-least-32-bytes!!")


@pytest.fixture
def service(settings):
    return JWTService(settings)


class TestGetUserIdFromToken:
    def test_valid_token(self, service, settings):
        user_id = UserId(uuid4())
        token = create_token(str(user_id), "Alice", settings)

        assert service.get_user_id_from_token(token) == user_id

    def test_missing_token(self, service):
        assert service.get_user_id_from_token(None) is None
        assert service.get_user_id_from_token("") is None

    def test_garbage_token(self, service):
        assert service.get_user_id_from_token("not.a.jwt") is None

    def test_other_secret(self, service):
        token = create_token(
            str(uuid4()),
            "Mallory",
            AuthSettings(jwt_secret="another-secret-of-32-bytes-or-more"),
        )

        assert service.get_user_id_from_token(token) is None

    def test_expired_token(self, service, settings):
        issued = datetime.now(timezone.utc) - timedelta(days=2)
        token = jwt.encode(
            {"uid": str(uuid4()), "iat": issued, "exp": issued + timedelta(days=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)
        assert service.get_user_id_from_token(token) is None

    def test_uid_must_be_a_user_id(self, service, settings):
        token = create_token("firebase-uid-123", "Bob", settings)

        assert service.get_user_id_from_token(token) is None

    def test_audience_checked_when_configured(self, settings):
        strict = AuthSettings(
            jwt_secret=settings.jwt_secret, jwt_audience="topmeup-web"
        )
        user_id = UserId(uuid4())

        assert JWTService(strict).get_user_id_from_token(
            create_token(str(user_id), "Alice", strict)
        ) == user_id
        assert JWTService(strict).get_user_id_from_token(
            create_token(str(user_id), "Alice", settings)
        ) is None


class TestGetPayloadFromToken:
    def test_carries_profile_claims(self, service, settings):
        user_id = UserId(uuid4())
        token = create_token(str(user_id), "Alice", settings, email="alice@example.com")

        payload = service.get_payload_from_token(token)

        assert payload is not None
        assert payload.user_id == str(user_id)
        assert payload.name == "Alice"
        assert payload.email == "alice@example.com"

    def test_invalid_token(self, service, settings):
        assert service.get_payload_from_token(None) is None
        assert service.get_payload_from_token("not.a.jwt") is None
        assert service.get_payload_from_token(
            create_token("firebase-uid-123", "Bob", settings)
        ) is None
