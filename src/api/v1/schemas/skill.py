"""Pydantic schemas for Skill API."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from api.v1.schemas.common import PatchModel, UrlStr
from domain.entities.skill import SkillWithIcon


class SkillCreate(BaseModel):
    """Schema for creating a Skill."""

    title: str = Field(..., min_length=2, max_length=50)
    description: str = Field(..., min_length=2, max_length=500)
    link: UrlStr
    icon_url: UrlStr | None = None
    icon_file: str | None = Field(None, description="Storage id of an uploaded icon")

    @model_validator(mode="after")
    def require_icon_source(self) -> "SkillCreate":
        if not self.icon_url and not self.icon_file:
            raise ValueError("Either icon_url or icon_file must be provided")
        return self


class SkillUpdate(PatchModel):
    """Schema for updating a Skill (all fields optional)."""

    non_nullable: ClassVar[frozenset[str]] = frozenset({"title", "description", "link"})

    title: str | None = Field(None, min_length=2, max_length=50)
    description: str | None = Field(None, min_length=2, max_length=500)
    link: UrlStr | None = None
    icon_url: UrlStr | None = None
    icon_file: str | None = None


class SkillResponse(BaseModel):
    """Schema for Skill response.

    ``icon`` is the URL to display: the uploaded file when there is one,
    otherwise ``icon_url``.
    """

    id: UUID
    title: str
    description: str
    link: str
    icon_url: str | None
    icon_file: str | None
    icon: str | None
    created_at: datetime

    @classmethod
    def from_entity(cls, item: SkillWithIcon) -> "SkillResponse":
        skill = item.skill
        return cls(
            id=skill.id,
            title=skill.title,
            description=skill.description,
            link=skill.link,
            icon_url=skill.icon_url,
            icon_file=skill.icon_file,
            icon=item.resolved_icon_url,
            created_at=skill.created_at,
        )


class SkillListResponse(BaseModel):
    """Schema for list of Skills."""

    data: list[SkillResponse]


class SkillDetailResponse(BaseModel):
    """Schema for single Skill."""

    data: SkillResponse
