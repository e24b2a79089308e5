"""Service offering domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4

from domain.entities.delimited import BULLET_DELIMITER, CSV_DELIMITER, split_items


class ExperienceLevel(StrEnum):
    """Self-assessed experience level for a service."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


class PriceType(StrEnum):
    """What the starting price is charged per."""

    PROJECT = "project"
    HOUR = "hour"
    FIXED = "fixed"


class ServiceCategory(StrEnum):
    """Service category used for filtering."""

    DESIGN = "design"
    DEVELOPMENT = "development"
    CONSULTING = "consulting"


@dataclass
class Service:
    """Domain entity for a Service flip card.

    Front side: title, icon, subtitle, badge and accent color.
    Back side: description, key features, technologies and experience.
    Inactive services are hidden from public listings but kept for admins.
    """

    title: str
    icon: str
    description: str
    key_features: str
    technologies: str
    experience_level: ExperienceLevel
    project_count: int
    cta_text: str
    cta_link: str
    category: ServiceCategory
    display_order: int
    subtitle: str | None = None
    badge_text: str | None = None
    accent_color: str | None = None
    starting_price: float | None = None
    currency: str | None = None
    price_type: PriceType | None = None
    delivery_time: str | None = None
    is_active: bool = True
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime | None = None

    @property
    def key_feature_items(self) -> list[str]:
        return split_items(self.key_features, BULLET_DELIMITER)

    @property
    def technology_items(self) -> list[str]:
        return split_items(self.technologies, CSV_DELIMITER)

    def matches(self, term: str) -> bool:
        """Case-insensitive substring search over the descriptive fields."""
        needle = term.lower()
        return any(
            needle in value.lower()
            for value in (
                self.title,
                self.description,
                self.technologies,
                self.key_features,
            )
        )

    def deactivate(self) -> None:
        """Hide the service from public listings."""
        self.is_active = False
        self.updated_at = datetime.utcnow()


@dataclass(frozen=True, slots=True)
class ServiceWithIcon:
    """Read-only value object: a Service with its icon resolved to a URL."""

    service: Service
    icon_url: str | None


@dataclass(frozen=True, slots=True)
class ServicePage:
    """One page of the admin service listing."""

    items: list[ServiceWithIcon]
    has_more: bool
    next_cursor: str | None
