"""Per-section copy entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class Section(StrEnum):
    """Site sections that carry their own title/header/description copy."""

    PROJECTS = "projects"
    SERVICES = "services"
    EXPERIENCE = "experience"
    SKILLS = "skills"


@dataclass
class ProjectDetails:
    """Title, header and description for one site section.

    Each record is tagged with the section it belongs to; the newest record
    per section is the one rendered.
    """

    section: Section
    title: str
    header: str
    description: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime | None = None
