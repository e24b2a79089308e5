"""Authentication provider protocol."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

ADMIN_ROLE = "admin"


@dataclass
class AdminSession:
    """Represents an admin session extracted from an auth token."""

    subject: str
    expires_at: datetime
    role: str = ADMIN_ROLE

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    def login(self, passkey: str) -> tuple[str, AdminSession]:
        """
        Exchange the admin passkey for a signed session token.

        Args:
            passkey: The six-digit admin passkey

        Returns:
            The token and the session it encodes

        Raises:
            InvalidPasskeyError: If the passkey does not match
        """
        ...

    async def validate_token(self, token: str) -> Optional[AdminSession]:
        """
        Validate a session token.

        Args:
            token: The bearer token to validate

        Returns:
            AdminSession if valid, None if invalid
        """
        ...
