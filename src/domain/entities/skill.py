"""Skill domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Skill:
    """Domain entity for a Skill card.

    A skill shows either an external icon URL or an uploaded icon file.
    When both are set, the uploaded file wins.
    """

    title: str
    description: str
    link: str
    icon_url: str | None = None
    icon_file: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def has_icon_source(self) -> bool:
        return bool(self.icon_url or self.icon_file)


@dataclass(frozen=True, slots=True)
class SkillWithIcon:
    """Read-only value object: a Skill with its icon resolved to a URL."""

    skill: Skill
    resolved_icon_url: str | None
