"""Unit tests for JWT authentication adapter."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from contenthub.auth.adapters.base import AuthenticationError
from contenthub.auth.adapters.jwt import JWTAuthAdapter


@pytest.fixture
def secret_key():
    return "test-secret-key-for-testing-only"


@pytest.fixture
def jwt_adapter(secret_key):
    return JWTAuthAdapter(
        secret_key=secret_key,
        algorithm="HS256",
        issuer="test-contenthub",
        audience="test-api",
    )


def make_token(secret_key, **overrides):
    now = datetime.now(UTC)
    payload = {
        "iss": "test-contenthub",
        "aud": "test-api",
        "sub": "42",
        "email": "test@example.com",
        "iat": now,
        "nbf": now,
        "exp": now + timedelta(hours=1),
    }
    payload.update(overrides)
    return jwt.encode(payload, secret_key, algorithm="HS256")


class TestJWTAdapter:
    """Test JWT authentication adapter."""

    @pytest.mark.asyncio
    async def test_verify_valid_token(self, jwt_adapter, secret_key):
        principal = await jwt_adapter.verify_token(make_token(secret_key))

        assert principal["provider"] == "jwt"
        assert principal["subject"] == "42"
        assert principal["email"] == "test@example.com"
        assert principal["claims"]["aud"] == "test-api"

    @pytest.mark.asyncio
    async def test_expired_token(self, jwt_adapter, secret_key):
        past = datetime.now(UTC) - timedelta(hours=2)
        token = make_token(secret_key, iat=past, nbf=past, exp=past + timedelta(minutes=30))

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_wrong_secret(self, jwt_adapter):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token(make_token("another-secret"))

    @pytest.mark.asyncio
    async def test_wrong_audience(self, jwt_adapter, secret_key):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token(make_token(secret_key, aud="other-api"))

    @pytest.mark.asyncio
    async def test_missing_subject(self, jwt_adapter, secret_key):
        with pytest.raises(AuthenticationError, match="Missing 'sub' claim"):
            await jwt_adapter.verify_token(make_token(secret_key, sub=""))

    @pytest.mark.asyncio
    async def test_malformed_token(self, jwt_adapter):
        with pytest.raises(AuthenticationError):
            await jwt_adapter.verify_token("not-a-jwt")

    @pytest.mark.asyncio
    async def test_issue_and_verify(self, jwt_adapter):
        token = await jwt_adapter.issue_token(user_id=7, claims={"email": "seven@example.com"})
        principal = await jwt_adapter.verify_token(token)

        assert principal["subject"] == "7"
        assert principal["email"] == "seven@example.com"

    @pytest.mark.asyncio
    async def test_issued_token_expiry(self, secret_key):
        adapter = JWTAuthAdapter(secret_key=secret_key, token_expiry_hours=2)
        token = await adapter.issue_token(user_id=1)
        payload = jwt.decode(token, secret_key, algorithms=["HS256"], audience="contenthub-api")

        assert payload["iss"] == "contenthub"
        assert payload["exp"] - payload["iat"] == 2 * 3600
