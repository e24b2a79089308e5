"""Project service layer."""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

from core.exceptions import ProjectNotFoundError
from domain.entities.project import Project, ProjectWithImage
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.patching import apply_changes
from domain.services.storage_service import StorageService

PROJECT_FIELDS = frozenset(
    {
        "image",
        "card_title",
        "card_description",
        "tag",
        "github_link",
        "website_link",
    }
)


class ProjectService:
    """Service layer for portfolio Project cards."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        storage: StorageService,
    ) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def create(
        self,
        image: str,
        card_title: str,
        card_description: str,
        tag: str,
        github_link: str,
        website_link: str | None = None,
    ) -> ProjectWithImage:
        """Create a project. ``image`` must reference an uploaded blob."""
        async with self._uow_factory() as uow:
            image = await self._storage.require(uow, image)
            project = Project(
                image=image,
                card_title=card_title,
                card_description=card_description,
                tag=tag,
                github_link=github_link,
                website_link=website_link,
            )
            created = await uow.projects.create(project)
            await uow.commit()
            return await self._with_image(uow, created)

    async def get_all(self) -> list[ProjectWithImage]:
        """Get all projects, most recent first, with image URLs."""
        async with self._uow_factory() as uow:
            projects = await uow.projects.get_all()
            return [await self._with_image(uow, project) for project in projects]

    async def get_by_tag(self, tag: str) -> list[ProjectWithImage]:
        """Get projects whose tag list contains ``tag``, most recent first."""
        async with self._uow_factory() as uow:
            projects = await uow.projects.get_all()
            return [
                await self._with_image(uow, project)
                for project in projects
                if project.has_tag(tag)
            ]

    async def get_by_id(self, project_id: UUID) -> ProjectWithImage:
        """Get a specific project with its image URL."""
        async with self._uow_factory() as uow:
            project = await uow.projects.get(project_id)
            if not project:
                raise ProjectNotFoundError(str(project_id))
            return await self._with_image(uow, project)

    async def update(
        self, project_id: UUID, changes: Mapping[str, Any]
    ) -> ProjectWithImage:
        """Partially update a project and stamp updated_at."""
        async with self._uow_factory() as uow:
            project = await uow.projects.get(project_id)
            if not project:
                raise ProjectNotFoundError(str(project_id))

            changes = dict(changes)
            if "image" in changes:
                changes["image"] = await self._storage.require(uow, changes["image"])

            apply_changes(project, changes, PROJECT_FIELDS)
            project.updated_at = datetime.utcnow()

            updated = await uow.projects.update(project)
            await uow.commit()
            return await self._with_image(uow, updated)

    async def delete(self, project_id: UUID) -> bool:
        """Delete a project. Its image is left for the orphan sweep."""
        async with self._uow_factory() as uow:
            deleted = await uow.projects.delete(project_id)
            if not deleted:
                raise ProjectNotFoundError(str(project_id))
            await uow.commit()
            return True

    async def _with_image(self, uow: IUnitOfWork, project: Project) -> ProjectWithImage:
        image_url = await self._storage.resolve(project.image, uow)
        return ProjectWithImage(project=project, image_url=image_url)
