"""Pydantic schemas for ProjectDetails (section copy) API."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import PatchModel
from domain.entities.project_details import Section


class ProjectDetailsCreate(BaseModel):
    """Schema for creating section copy."""

    section: Section
    title: str = Field(..., min_length=2, max_length=50)
    header: str = Field(..., min_length=2, max_length=50)
    description: str = Field(..., min_length=2, max_length=1000)


class ProjectDetailsUpdate(PatchModel):
    """Schema for updating section copy (all fields optional)."""

    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"section", "title", "header", "description"}
    )

    section: Section | None = None
    title: str | None = Field(None, min_length=2, max_length=50)
    header: str | None = Field(None, min_length=2, max_length=50)
    description: str | None = Field(None, min_length=2, max_length=1000)


class ProjectDetailsResponse(BaseModel):
    """Schema for section copy response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "section": "projects",
                "title": "Projects",
                "header": "Things I have built",
                "description": "A selection of recent client and side projects.",
                "created_at": "2026-01-28T10:00:00",
                "updated_at": None,
            }
        },
    )

    id: UUID
    section: Section
    title: str
    header: str
    description: str
    created_at: datetime
    updated_at: datetime | None = None


class ProjectDetailsListResponse(BaseModel):
    """Schema for list of section copy records."""

    data: list[ProjectDetailsResponse]


class ProjectDetailsDetailResponse(BaseModel):
    """Schema for a single section copy record."""

    data: ProjectDetailsResponse


class SectionDetailsResponse(BaseModel):
    """Schema for the copy currently shown for a section, if any."""

    data: ProjectDetailsResponse | None
