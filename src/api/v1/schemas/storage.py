"""Pydantic schemas for Storage API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UploadTargetResponse(BaseModel):
    """Schema for an issued upload URL."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "storage_id": "5f0c2a4e-3c1d-4d7e-9a55-0b8f4d9b6c11",
                "upload_url": "/api/v1/storage/uploads/eyJhbGciOi...",
                "expires_at": "2026-01-28T11:00:00",
            }
        },
    )

    storage_id: UUID
    upload_url: str
    expires_at: datetime


class UploadTargetDetailResponse(BaseModel):
    """Schema for single upload target."""

    data: UploadTargetResponse


class UploadResultResponse(BaseModel):
    """Schema for a completed upload.

    ``storageId`` is the field name browser clients read; ``storage_id``
    carries the same value.
    """

    model_config = ConfigDict(populate_by_name=True)

    storage_id_camel: str = Field(..., serialization_alias="storageId", alias="storageId")
    storage_id: str
    content_type: str
    size: int


class ResolvedUrlResponse(BaseModel):
    """Schema for a resolved download URL (null when the reference is unknown)."""

    storage_id: str
    url: str | None


class ResolvedUrlDetailResponse(BaseModel):
    """Schema for single resolved URL."""

    data: ResolvedUrlResponse


class BlobDeletedResponse(BaseModel):
    """Schema for a blob delete result."""

    storage_id: str
    deleted: bool
