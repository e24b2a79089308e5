"""Pydantic schemas for Project API."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import CsvText, PatchModel, UrlStr
from domain.entities.project import ProjectWithImage


class ProjectCreate(BaseModel):
    """Schema for creating a Project.

    ``tag`` accepts a list or an already comma-joined string.
    """

    image: str = Field(..., min_length=1, description="Storage id of the uploaded image")
    card_title: str = Field(..., min_length=2, max_length=100)
    card_description: str = Field(..., min_length=2, max_length=500)
    tag: CsvText = Field(..., min_length=2, max_length=255)
    github_link: UrlStr
    website_link: UrlStr | None = None


class ProjectUpdate(PatchModel):
    """Schema for updating a Project (all fields optional)."""

    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"image", "card_title", "card_description", "tag", "github_link"}
    )

    image: str | None = Field(None, min_length=1)
    card_title: str | None = Field(None, min_length=2, max_length=100)
    card_description: str | None = Field(None, min_length=2, max_length=500)
    tag: CsvText | None = Field(None, min_length=2, max_length=255)
    github_link: UrlStr | None = None
    website_link: UrlStr | None = None


class ProjectResponse(BaseModel):
    """Schema for Project response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "image": "5f0c2a4e-3c1d-4d7e-9a55-0b8f4d9b6c11",
                "image_url": "/api/v1/storage/files/eyJhbGciOi...",
                "card_title": "Weather dashboard",
                "card_description": "Realtime forecasts with offline caching.",
                "tag": "React, TypeScript",
                "tags": ["React", "TypeScript"],
                "github_link": "https://github.com/jane/weather",
                "website_link": None,
                "created_at": "2026-01-28T10:00:00",
                "updated_at": None,
            }
        },
    )

    id: UUID
    image: str
    image_url: str | None
    card_title: str
    card_description: str
    tag: str
    tags: list[str]
    github_link: str
    website_link: str | None
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, item: ProjectWithImage) -> "ProjectResponse":
        project = item.project
        return cls(
            id=project.id,
            image=project.image,
            image_url=item.image_url,
            card_title=project.card_title,
            card_description=project.card_description,
            tag=project.tag,
            tags=project.tags,
            github_link=project.github_link,
            website_link=project.website_link,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectListResponse(BaseModel):
    """Schema for list of Projects."""

    data: list[ProjectResponse]


class ProjectDetailResponse(BaseModel):
    """Schema for single Project."""

    data: ProjectResponse
