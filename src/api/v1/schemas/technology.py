"""Pydantic schemas for Technology API."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, Field

from api.v1.schemas.common import PatchModel
from domain.entities.technology import TechnologyWithIcon


class TechnologyCreate(BaseModel):
    """Schema for creating a Technology.

    ``icon`` is a storage id or a literal path/URL. Without ``order`` the
    technology goes after the current last one.
    """

    name: str = Field(..., min_length=2, max_length=50)
    icon: str = Field(..., min_length=1, max_length=500)
    is_visible: bool = True
    order: int | None = Field(None, ge=0)


class TechnologyBulkCreate(BaseModel):
    """Schema for inserting several Technologies at once."""

    items: list[TechnologyCreate] = Field(..., min_length=1, max_length=100)


class TechnologyUpdate(PatchModel):
    """Schema for updating a Technology (all fields optional)."""

    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "icon", "is_visible"})

    name: str | None = Field(None, min_length=2, max_length=50)
    icon: str | None = Field(None, min_length=1, max_length=500)
    is_visible: bool | None = None
    order: int | None = Field(None, ge=0)


class TechnologyVisibility(BaseModel):
    """Schema for showing or hiding a Technology."""

    is_visible: bool


class TechnologyResponse(BaseModel):
    """Schema for Technology response."""

    id: UUID
    name: str
    icon: str
    icon_url: str | None
    is_visible: bool
    order: int | None
    created_at: datetime

    @classmethod
    def from_entity(cls, item: TechnologyWithIcon) -> "TechnologyResponse":
        technology = item.technology
        return cls(
            id=technology.id,
            name=technology.name,
            icon=technology.icon,
            icon_url=item.icon_url,
            is_visible=technology.is_visible,
            order=technology.order,
            created_at=technology.created_at,
        )


class TechnologyListResponse(BaseModel):
    """Schema for list of Technologies."""

    data: list[TechnologyResponse]


class TechnologyDetailResponse(BaseModel):
    """Schema for single Technology."""

    data: TechnologyResponse
