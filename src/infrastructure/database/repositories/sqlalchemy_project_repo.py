"""SQLAlchemy implementation of Project repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.project import Project
from infrastructure.database.models import ProjectModel


class SQLAlchemyProjectRepository:
    """SQLAlchemy implementation of IProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Project | None:
        """Get a project by ID."""
        model = await self._session.get(ProjectModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Project]:
        """Get all projects, most recent first."""
        stmt = select(ProjectModel).order_by(ProjectModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, project: Project) -> Project:
        """Create a new project."""
        model = self._to_model(project)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, project: Project) -> Project:
        """Update an existing project."""
        model = await self._session.get(ProjectModel, project.id)
        if not model:
            raise ValueError(f"Project {project.id} not found")

        model.image = project.image
        model.card_title = project.card_title
        model.card_description = project.card_description
        model.tag = project.tag
        model.github_link = project.github_link
        model.website_link = project.website_link
        model.updated_at = project.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a project."""
        model = await self._session.get(ProjectModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: ProjectModel) -> Project:
        """Convert ORM model to domain entity."""
        return Project(
            id=model.id,
            image=model.image,
            card_title=model.card_title,
            card_description=model.card_description,
            tag=model.tag,
            github_link=model.github_link,
            website_link=model.website_link,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Project) -> ProjectModel:
        """Convert domain entity to ORM model."""
        return ProjectModel(
            id=entity.id,
            image=entity.image,
            card_title=entity.card_title,
            card_description=entity.card_description,
            tag=entity.tag,
            github_link=entity.github_link,
            website_link=entity.website_link,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
