"""Section copy service layer."""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

from core.exceptions import ProjectDetailsNotFoundError
from domain.entities.project_details import ProjectDetails, Section
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.patching import apply_changes

PROJECT_DETAILS_FIELDS = frozenset({"section", "title", "header", "description"})


class ProjectDetailsService:
    """Service layer for per-section title/header/description copy."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(
        self,
        section: Section,
        title: str,
        header: str,
        description: str,
    ) -> ProjectDetails:
        """Create copy for a section. The newest record per section wins."""
        async with self._uow_factory() as uow:
            created = await uow.project_details.create(
                ProjectDetails(
                    section=section,
                    title=title,
                    header=header,
                    description=description,
                )
            )
            await uow.commit()
            return created  # type: ignore[no-any-return]

    async def get_all(self, section: Section | None = None) -> list[ProjectDetails]:
        """Get all records, most recent first, optionally for one section."""
        async with self._uow_factory() as uow:
            return await uow.project_details.get_all(section)  # type: ignore[no-any-return]

    async def get_by_id(self, details_id: UUID) -> ProjectDetails:
        """Get a specific record."""
        async with self._uow_factory() as uow:
            details = await uow.project_details.get(details_id)
            if not details:
                raise ProjectDetailsNotFoundError(str(details_id))
            return details

    async def get_for_section(self, section: Section) -> ProjectDetails | None:
        """Get the copy currently shown for a section."""
        async with self._uow_factory() as uow:
            return await uow.project_details.get_latest_for_section(section)  # type: ignore[no-any-return]

    async def update(
        self, details_id: UUID, changes: Mapping[str, Any]
    ) -> ProjectDetails:
        """Partially update a record and stamp updated_at."""
        async with self._uow_factory() as uow:
            details = await uow.project_details.get(details_id)
            if not details:
                raise ProjectDetailsNotFoundError(str(details_id))

            apply_changes(details, changes, PROJECT_DETAILS_FIELDS)
            details.updated_at = datetime.utcnow()

            updated = await uow.project_details.update(details)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def delete(self, details_id: UUID) -> bool:
        """Delete a record."""
        async with self._uow_factory() as uow:
            deleted = await uow.project_details.delete(details_id)
            if not deleted:
                raise ProjectDetailsNotFoundError(str(details_id))
            await uow.commit()
            return True
