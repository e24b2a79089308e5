"""Pydantic schemas for Service API."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, Field

from api.v1.schemas.common import BulletText, CsvText, PatchModel
from domain.entities.service import (
    ExperienceLevel,
    PriceType,
    ServiceCategory,
    ServicePage,
    ServiceWithIcon,
)

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class ServiceCreate(BaseModel):
    """Schema for creating a Service.

    ``key_features`` and ``technologies`` accept a list or the already-joined
    string (bullets and comma-separated respectively).
    """

    # Front side
    title: str = Field(..., min_length=2, max_length=100)
    icon: str = Field(..., min_length=1, description="Storage id of the uploaded icon")
    subtitle: str | None = Field(None, max_length=50)
    badge_text: str | None = Field(None, max_length=20)
    accent_color: str | None = Field(None, pattern=HEX_COLOR)

    # Back side
    description: str = Field(..., min_length=20, max_length=500)
    key_features: BulletText = Field(..., min_length=10, max_length=300)
    technologies: CsvText = Field(..., min_length=5, max_length=200)
    experience_level: ExperienceLevel
    project_count: int = Field(0, ge=0, le=1000)

    # Call to action
    cta_text: str = Field(..., min_length=2, max_length=30)
    cta_link: str = Field(..., min_length=1, max_length=500)

    # Pricing
    starting_price: float | None = Field(None, ge=0)
    currency: str | None = Field(None, max_length=5)
    price_type: PriceType | None = None
    delivery_time: str | None = Field(None, max_length=50)

    category: ServiceCategory
    display_order: int = Field(..., ge=1, le=100)


class ServiceUpdate(PatchModel):
    """Schema for updating a Service (all fields optional)."""

    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {
            "title",
            "icon",
            "description",
            "key_features",
            "technologies",
            "experience_level",
            "project_count",
            "cta_text",
            "cta_link",
            "category",
            "display_order",
            "is_active",
        }
    )

    title: str | None = Field(None, min_length=2, max_length=100)
    icon: str | None = Field(None, min_length=1)
    subtitle: str | None = Field(None, max_length=50)
    badge_text: str | None = Field(None, max_length=20)
    accent_color: str | None = Field(None, pattern=HEX_COLOR)
    description: str | None = Field(None, min_length=20, max_length=500)
    key_features: BulletText | None = Field(None, min_length=10, max_length=300)
    technologies: CsvText | None = Field(None, min_length=5, max_length=200)
    experience_level: ExperienceLevel | None = None
    project_count: int | None = Field(None, ge=0, le=1000)
    cta_text: str | None = Field(None, min_length=2, max_length=30)
    cta_link: str | None = Field(None, min_length=1, max_length=500)
    starting_price: float | None = Field(None, ge=0)
    currency: str | None = Field(None, max_length=5)
    price_type: PriceType | None = None
    delivery_time: str | None = Field(None, max_length=50)
    category: ServiceCategory | None = None
    display_order: int | None = Field(None, ge=1, le=100)
    is_active: bool | None = None


class ServiceResponse(BaseModel):
    """Schema for Service response."""

    id: UUID
    title: str
    icon: str
    icon_url: str | None
    subtitle: str | None
    badge_text: str | None
    accent_color: str | None
    description: str
    key_features: str
    key_feature_items: list[str]
    technologies: str
    technology_items: list[str]
    experience_level: ExperienceLevel
    project_count: int
    cta_text: str
    cta_link: str
    starting_price: float | None
    currency: str | None
    price_type: PriceType | None
    delivery_time: str | None
    category: ServiceCategory
    display_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, item: ServiceWithIcon) -> "ServiceResponse":
        service = item.service
        return cls(
            id=service.id,
            title=service.title,
            icon=service.icon,
            icon_url=item.icon_url,
            subtitle=service.subtitle,
            badge_text=service.badge_text,
            accent_color=service.accent_color,
            description=service.description,
            key_features=service.key_features,
            key_feature_items=service.key_feature_items,
            technologies=service.technologies,
            technology_items=service.technology_items,
            experience_level=service.experience_level,
            project_count=service.project_count,
            cta_text=service.cta_text,
            cta_link=service.cta_link,
            starting_price=service.starting_price,
            currency=service.currency,
            price_type=service.price_type,
            delivery_time=service.delivery_time,
            category=service.category,
            display_order=service.display_order,
            is_active=service.is_active,
            created_at=service.created_at,
            updated_at=service.updated_at,
        )


class ServiceListResponse(BaseModel):
    """Schema for list of Services."""

    data: list[ServiceResponse]


class ServiceDetailResponse(BaseModel):
    """Schema for single Service."""

    data: ServiceResponse


class ServicePageResponse(BaseModel):
    """Schema for one page of the admin listing."""

    data: list[ServiceResponse]
    has_more: bool
    next_cursor: str | None = None

    @classmethod
    def from_page(cls, page: ServicePage) -> "ServicePageResponse":
        return cls(
            data=[ServiceResponse.from_entity(item) for item in page.items],
            has_more=page.has_more,
            next_cursor=page.next_cursor,
        )


class ServiceCountsResponse(BaseModel):
    """Schema for active service counts per category."""

    data: dict[str, int]
