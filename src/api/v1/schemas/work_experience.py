"""Pydantic schemas for WorkExperience API."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from api.v1.schemas.common import BulletText, PatchModel, UtcDatetime
from domain.entities.work_experience import WorkExperienceWithIcon


class WorkExperienceCreate(BaseModel):
    """Schema for creating a WorkExperience.

    ``description`` accepts a list of bullet points or the joined string.
    """

    icon: str = Field(..., min_length=1, description="Storage id of the uploaded icon")
    workplace: str = Field(..., min_length=2, max_length=100)
    work_title: str = Field(..., min_length=2, max_length=100)
    description: BulletText = Field(..., min_length=10, max_length=1000)
    start_date: UtcDatetime
    end_date: UtcDatetime | None = None
    is_current_job: bool = False

    @model_validator(mode="after")
    def check_date_range(self) -> "WorkExperienceCreate":
        if not self.is_current_job and self.end_date is None:
            raise ValueError("end_date is required unless this is the current job")
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class WorkExperienceUpdate(PatchModel):
    """Schema for updating a WorkExperience (all fields optional).

    The date rule is checked against the merged record by the service.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"icon", "workplace", "work_title", "description", "start_date", "is_current_job"}
    )

    icon: str | None = Field(None, min_length=1)
    workplace: str | None = Field(None, min_length=2, max_length=100)
    work_title: str | None = Field(None, min_length=2, max_length=100)
    description: BulletText | None = Field(None, min_length=10, max_length=1000)
    start_date: UtcDatetime | None = None
    end_date: UtcDatetime | None = None
    is_current_job: bool | None = None


class WorkExperienceResponse(BaseModel):
    """Schema for WorkExperience response.

    ``end_date`` is always null for the current job.
    """

    id: UUID
    icon: str
    icon_url: str | None
    workplace: str
    work_title: str
    description: str
    description_items: list[str]
    start_date: datetime
    end_date: datetime | None
    is_current_job: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, item: WorkExperienceWithIcon) -> "WorkExperienceResponse":
        experience = item.experience
        return cls(
            id=experience.id,
            icon=experience.icon,
            icon_url=item.icon_url,
            workplace=experience.workplace,
            work_title=experience.work_title,
            description=experience.description,
            description_items=experience.description_items,
            start_date=experience.start_date,
            end_date=experience.visible_end_date,
            is_current_job=experience.is_current_job,
            created_at=experience.created_at,
        )


class WorkExperienceListResponse(BaseModel):
    """Schema for list of WorkExperiences."""

    data: list[WorkExperienceResponse]


class WorkExperienceDetailResponse(BaseModel):
    """Schema for single WorkExperience."""

    data: WorkExperienceResponse


class LatestWorkExperienceResponse(BaseModel):
    """Schema for the most recent WorkExperience, if any."""

    data: WorkExperienceResponse | None


class DeletedWorkExperienceResponse(BaseModel):
    """Schema for the id of a deleted WorkExperience."""

    id: UUID
