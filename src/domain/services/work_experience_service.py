"""Work experience service layer."""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import (
    EmptyCollectionError,
    InvalidDateRangeError,
    WorkExperienceNotFoundError,
)
from domain.entities.work_experience import WorkExperience, WorkExperienceWithIcon
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.patching import apply_changes
from domain.services.storage_service import StorageService, parse_reference

logger = structlog.get_logger()

WORK_EXPERIENCE_FIELDS = frozenset(
    {
        "icon",
        "workplace",
        "work_title",
        "description",
        "start_date",
        "end_date",
        "is_current_job",
    }
)


class WorkExperienceService:
    """Service layer for the experience timeline.

    Deleting an entry also deletes its icon blob. Both deletes run in the
    same transaction, so a failure leaves neither an orphaned record nor an
    orphaned blob.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        storage: StorageService,
    ) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def create(
        self,
        icon: str,
        workplace: str,
        work_title: str,
        description: str,
        start_date: datetime,
        end_date: datetime | None = None,
        is_current_job: bool = False,
    ) -> WorkExperienceWithIcon:
        """Create a timeline entry."""
        experience = WorkExperience(
            icon=icon,
            workplace=workplace,
            work_title=work_title,
            description=description,
            start_date=start_date,
            end_date=end_date,
            is_current_job=is_current_job,
        )
        self._check_dates(experience)

        async with self._uow_factory() as uow:
            experience.icon = await self._storage.require(uow, icon)
            created = await uow.work_experiences.create(experience)
            await uow.commit()
            return await self._with_icon(uow, created)

    async def get_all(self) -> list[WorkExperienceWithIcon]:
        """Get all entries, most recent first, with icon URLs."""
        async with self._uow_factory() as uow:
            experiences = await uow.work_experiences.get_all()
            return [await self._with_icon(uow, exp) for exp in experiences]

    async def get_by_id(self, experience_id: UUID) -> WorkExperienceWithIcon:
        """Get a specific entry."""
        async with self._uow_factory() as uow:
            experience = await uow.work_experiences.get(experience_id)
            if not experience:
                raise WorkExperienceNotFoundError(str(experience_id))
            return await self._with_icon(uow, experience)

    async def get_latest(self) -> WorkExperienceWithIcon | None:
        """Get the most recently created entry, or None."""
        async with self._uow_factory() as uow:
            experience = await uow.work_experiences.get_latest()
            if not experience:
                return None
            return await self._with_icon(uow, experience)

    async def update(
        self, experience_id: UUID, changes: Mapping[str, Any]
    ) -> WorkExperienceWithIcon:
        """Partially update an entry."""
        async with self._uow_factory() as uow:
            experience = await uow.work_experiences.get(experience_id)
            if not experience:
                raise WorkExperienceNotFoundError(str(experience_id))
            return await self._apply_update(uow, experience, changes)

    async def update_latest(self, changes: Mapping[str, Any]) -> WorkExperienceWithIcon:
        """Partially update the most recent entry."""
        async with self._uow_factory() as uow:
            experience = await uow.work_experiences.get_latest()
            if not experience:
                raise EmptyCollectionError("No work experience found to update")
            return await self._apply_update(uow, experience, changes)

    async def delete(self, experience_id: UUID) -> UUID:
        """Delete an entry together with its icon blob."""
        async with self._uow_factory() as uow:
            experience = await uow.work_experiences.get(experience_id)
            if not experience:
                raise WorkExperienceNotFoundError(str(experience_id))
            await self._delete_with_icon(uow, experience)
            return experience.id

    async def delete_latest(self) -> UUID:
        """Delete the most recent entry together with its icon blob."""
        async with self._uow_factory() as uow:
            experience = await uow.work_experiences.get_latest()
            if not experience:
                raise EmptyCollectionError("No work experience found to delete")
            await self._delete_with_icon(uow, experience)
            return experience.id

    async def _apply_update(
        self,
        uow: IUnitOfWork,
        experience: WorkExperience,
        changes: Mapping[str, Any],
    ) -> WorkExperienceWithIcon:
        changes = dict(changes)
        if "icon" in changes:
            changes["icon"] = await self._storage.require(uow, changes["icon"])

        apply_changes(experience, changes, WORK_EXPERIENCE_FIELDS)
        self._check_dates(experience)

        updated = await uow.work_experiences.update(experience)
        await uow.commit()
        return await self._with_icon(uow, updated)

    async def _delete_with_icon(self, uow: IUnitOfWork, experience: WorkExperience) -> None:
        storage_id = parse_reference(experience.icon)
        if storage_id is not None:
            await uow.blobs.delete(storage_id)
        await uow.work_experiences.delete(experience.id)
        await uow.commit()

        logger.info(
            "work_experience_deleted",
            work_experience_id=str(experience.id),
            icon=experience.icon,
        )

    def _check_dates(self, experience: WorkExperience) -> None:
        error = experience.date_range_error()
        if error:
            raise InvalidDateRangeError(error)

    async def _with_icon(
        self, uow: IUnitOfWork, experience: WorkExperience
    ) -> WorkExperienceWithIcon:
        icon_url = await self._storage.resolve(experience.icon, uow)
        return WorkExperienceWithIcon(experience=experience, icon_url=icon_url)
