"""Signed, expiring storage URL tokens."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from jose import JWTError, jwt

from core.config import settings


class JoseUrlSigner:
    """Signs storage ids with HS256 so upload and download URLs carry no state.

    ``purpose`` is part of the signed claims, so an upload token cannot be
    replayed as a download token and vice versa.
    """

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm

    def sign(self, storage_id: UUID, purpose: str, ttl: timedelta) -> tuple[str, datetime]:
        expires_at = datetime.utcnow().replace(microsecond=0) + ttl
        payload = {
            "sub": str(storage_id),
            "purpose": purpose,
            "exp": expires_at,
            "jti": uuid4().hex,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm), expires_at

    def verify(self, token: str, purpose: str) -> Optional[UUID]:
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError:
            return None

        if payload.get("purpose") != purpose:
            return None
        try:
            return UUID(payload.get("sub", ""))
        except ValueError:
            return None
