"""Pydantic schemas for Header and Introduction API."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import PatchModel
from domain.entities.header import Header, Introduction


class HeaderCreate(BaseModel):
    """Schema for creating a Header."""

    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=2, max_length=1000)


class HeaderUpdate(PatchModel):
    """Schema for updating a Header (all fields optional)."""

    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "description"})

    name: str | None = Field(None, min_length=2, max_length=100)
    description: str | None = Field(None, min_length=2, max_length=1000)


class HeaderResponse(BaseModel):
    """Schema for Header response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Jane Doe",
                "description": "Full-stack developer building calm, fast web apps.",
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    name: str
    description: str
    created_at: datetime


class HeaderListResponse(BaseModel):
    """Schema for list of Headers."""

    data: list[HeaderResponse]


class HeaderDetailResponse(BaseModel):
    """Schema for single Header."""

    data: HeaderResponse


class CurrentHeaderResponse(BaseModel):
    """Schema for the header currently shown, if any."""

    data: HeaderResponse | None


class IntroductionCreate(BaseModel):
    """Schema for creating an Introduction."""

    title: str = Field(..., min_length=2, max_length=50)
    header: str = Field(..., min_length=2, max_length=50)
    description: str = Field(..., min_length=2, max_length=1000)


class IntroductionUpdate(PatchModel):
    """Schema for updating an Introduction (all fields optional)."""

    non_nullable: ClassVar[frozenset[str]] = frozenset({"title", "header", "description"})

    title: str | None = Field(None, min_length=2, max_length=50)
    header: str | None = Field(None, min_length=2, max_length=50)
    description: str | None = Field(None, min_length=2, max_length=1000)


class IntroductionResponse(BaseModel):
    """Schema for Introduction response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    header: str
    description: str
    created_at: datetime


class IntroductionListResponse(BaseModel):
    """Schema for list of Introductions."""

    data: list[IntroductionResponse]


class IntroductionDetailResponse(BaseModel):
    """Schema for single Introduction."""

    data: IntroductionResponse


class CurrentIntroductionResponse(BaseModel):
    """Schema for the introduction currently shown, if any."""

    data: IntroductionResponse | None


def header_response(header: Header) -> HeaderResponse:
    return HeaderResponse.model_validate(header)


def introduction_response(introduction: Introduction) -> IntroductionResponse:
    return IntroductionResponse.model_validate(introduction)
