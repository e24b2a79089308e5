"""Pydantic schemas for admin session API."""

from datetime import datetime

from pydantic import BaseModel, Field


class SessionCreate(BaseModel):
    """Schema for exchanging the admin passkey for a token."""

    passkey: str = Field(..., pattern=r"^\d{6}$", description="Six-digit admin passkey")


class SessionResponse(BaseModel):
    """Schema for an issued admin session token."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime


class SessionInfoResponse(BaseModel):
    """Schema for the session behind the current token."""

    subject: str
    role: str
    expires_at: datetime
