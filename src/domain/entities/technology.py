"""Technology domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Technology:
    """Domain entity for a technology badge.

    ``icon`` is either a storage reference or a literal path/URL.
    """

    name: str
    icon: str
    is_visible: bool = True
    order: int | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def sort_key(self) -> int:
        return self.order or 0


def sort_by_order(technologies: list[Technology]) -> list[Technology]:
    """Sort ascending by order, treating a missing order as 0.

    The sort is stable, so ties keep their storage order.
    """
    return sorted(technologies, key=lambda tech: tech.sort_key)


@dataclass(frozen=True, slots=True)
class TechnologyWithIcon:
    """Read-only value object: a Technology with its icon resolved to a URL."""

    technology: Technology
    icon_url: str | None
