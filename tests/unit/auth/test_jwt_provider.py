"""Unit tests for JWTAuthProvider."""

from datetime import datetime, timedelta

import pytest
from jose import jwt as jose_jwt

from core.exceptions import ErrorCode, InvalidPasskeyError
from infrastructure.auth.jwt_provider import ADMIN_SUBJECT, JWTAuthProvider
from infrastructure.auth.provider import ADMIN_ROLE, AdminSession

SECRET = "test-secret"


@pytest.fixture
def provider() -> JWTAuthProvider:
    return JWTAuthProvider(passkey="123456", secret_key=SECRET, algorithm="HS256")


class TestLogin:
    def test_correct_passkey_issues_admin_token(self, provider: JWTAuthProvider):
        token, session = provider.login("123456")

        claims = jose_jwt.decode(token, SECRET, algorithms=["HS256"])
        assert claims["sub"] == ADMIN_SUBJECT
        assert claims["role"] == ADMIN_ROLE
        assert session.is_admin
        assert session.expires_at > datetime.utcnow()

    def test_wrong_passkey_is_rejected(self, provider: JWTAuthProvider):
        with pytest.raises(InvalidPasskeyError) as exc_info:
            provider.login("000000")

        assert exc_info.value.error_code == ErrorCode.INVALID_PASSKEY
        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize("attempt", ["", "123456"])
    def test_unset_passkey_refuses_every_login(self, attempt: str):
        provider = JWTAuthProvider(passkey="", secret_key=SECRET, algorithm="HS256")

        with pytest.raises(InvalidPasskeyError):
            provider.login(attempt)

    def test_session_lifetime_follows_config(self):
        provider = JWTAuthProvider(passkey="123456", secret_key=SECRET, expire_minutes=5)

        _, session = provider.login("123456")

        assert session.expires_at <= datetime.utcnow() + timedelta(minutes=5)


class TestValidateToken:
    @pytest.mark.asyncio
    async def test_round_trip(self, provider: JWTAuthProvider):
        token, session = provider.login("123456")

        result = await provider.validate_token(token)

        assert result is not None
        assert result.subject == session.subject
        assert result.expires_at == session.expires_at

    @pytest.mark.asyncio
    async def test_expired_token(self, provider: JWTAuthProvider):
        expired = AdminSession(
            subject=ADMIN_SUBJECT, expires_at=datetime.utcnow() - timedelta(minutes=1)
        )
        token = provider.create_token(expired)

        assert await provider.validate_token(token) is None

    @pytest.mark.asyncio
    async def test_wrong_secret(self, provider: JWTAuthProvider):
        other = JWTAuthProvider(passkey="123456", secret_key="other-secret")
        token, _ = other.login("123456")

        assert await provider.validate_token(token) is None

    @pytest.mark.asyncio
    async def test_garbage(self, provider: JWTAuthProvider):
        assert await provider.validate_token("not.a.jwt") is None

    @pytest.mark.asyncio
    async def test_missing_role_claim(self, provider: JWTAuthProvider):
        token = jose_jwt.encode(
            {"sub": "admin", "exp": datetime.utcnow() + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )

        assert await provider.validate_token(token) is None

    @pytest.mark.asyncio
    async def test_keeps_non_admin_role(self, provider: JWTAuthProvider):
        session = AdminSession(
            subject="viewer",
            role="viewer",
            expires_at=datetime.utcnow() + timedelta(minutes=5),
        )

        result = await provider.validate_token(provider.create_token(session))

        assert result is not None
        assert not result.is_admin
