"""Project domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.entities.delimited import CSV_DELIMITER, split_items


@dataclass
class Project:
    """Domain entity for a portfolio Project card."""

    image: str
    card_title: str
    card_description: str
    tag: str
    github_link: str
    website_link: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime | None = None

    @property
    def tags(self) -> list[str]:
        return split_items(self.tag, CSV_DELIMITER)

    def has_tag(self, tag: str) -> bool:
        """Check membership in the comma-separated tag list (case-insensitive)."""
        wanted = tag.strip().lower()
        return any(item.lower() == wanted for item in self.tags)


@dataclass(frozen=True, slots=True)
class ProjectWithImage:
    """Read-only value object: a Project with its image resolved to a URL."""

    project: Project
    image_url: str | None
