"""JWT authentication provider implementation.

The admin gate is a single shared passkey checked on the server. A correct
passkey is exchanged for a short-lived HS256 session token:

    {
        "sub": "admin",
        "role": "admin",
        "iat": 1234567000,
        "exp": 1234567890
    }
"""

import hmac
from datetime import datetime, timedelta
from typing import Optional

import structlog
from jose import JWTError, jwt

from core.config import settings
from core.exceptions import InvalidPasskeyError
from infrastructure.auth.provider import AdminSession

logger = structlog.get_logger()

ADMIN_SUBJECT = "admin"


class JWTAuthProvider:
    """JWT-based authentication provider for the admin passkey gate."""

    def __init__(
        self,
        passkey: str = settings.admin_passkey,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._passkey = passkey
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def login(self, passkey: str) -> tuple[str, AdminSession]:
        """Check the passkey in constant time and issue a session token."""
        if not self._passkey:
            logger.warning("admin_login_disabled", reason="admin passkey not configured")
            raise InvalidPasskeyError()
        if not hmac.compare_digest(passkey.encode(), self._passkey.encode()):
            logger.warning("admin_login_failed")
            raise InvalidPasskeyError()

        session = AdminSession(
            subject=ADMIN_SUBJECT,
            expires_at=datetime.utcnow().replace(microsecond=0)
            + timedelta(minutes=self._expire_minutes),
        )
        logger.info("admin_login_succeeded", expires_at=session.expires_at.isoformat())
        return self.create_token(session), session

    async def validate_token(self, token: str) -> Optional[AdminSession]:
        """
        Validate a session token and extract the admin session.

        Args:
            token: The JWT to validate

        Returns:
            AdminSession if valid, None if invalid or expired
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError:
            return None

        subject = payload.get("sub")
        role = payload.get("role")
        exp = payload.get("exp")
        if not subject or not role or exp is None:
            return None

        return AdminSession(
            subject=subject,
            role=role,
            expires_at=datetime.utcfromtimestamp(exp),
        )

    def create_token(self, session: AdminSession) -> str:
        """
        Create a JWT for an admin session.

        Args:
            session: The session to encode

        Returns:
            The generated JWT string
        """
        payload: dict = {
            "sub": session.subject,
            "role": session.role,
            "iat": datetime.utcnow(),
            "exp": session.expires_at,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
