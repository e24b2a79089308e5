"""Work experience domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.entities.delimited import BULLET_DELIMITER, split_items


@dataclass
class WorkExperience:
    """Domain entity for a position on the experience timeline."""

    icon: str
    workplace: str
    work_title: str
    description: str
    start_date: datetime
    is_current_job: bool = False
    end_date: datetime | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def description_items(self) -> list[str]:
        return split_items(self.description, BULLET_DELIMITER)

    @property
    def visible_end_date(self) -> datetime | None:
        """End date as presented to readers; current jobs never show one."""
        return None if self.is_current_job else self.end_date

    def date_range_error(self) -> str | None:
        """Describe why the date range is invalid, or None when it is valid."""
        if not self.is_current_job and self.end_date is None:
            return "End date is required unless this is the current job"
        if self.end_date is not None and self.end_date < self.start_date:
            return "End date must be on or after the start date"
        return None


@dataclass(frozen=True, slots=True)
class WorkExperienceWithIcon:
    """Read-only value object: a WorkExperience with its icon resolved to a URL."""

    experience: WorkExperience
    icon_url: str | None
