"""SQLAlchemy implementation of the section copy repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.project_details import ProjectDetails, Section
from infrastructure.database.models import ProjectDetailsModel


class SQLAlchemyProjectDetailsRepository:
    """SQLAlchemy implementation of IProjectDetailsRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> ProjectDetails | None:
        """Get a record by ID."""
        model = await self._session.get(ProjectDetailsModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self, section: Section | None = None) -> list[ProjectDetails]:
        """Get all records, most recent first, optionally for one section."""
        stmt = select(ProjectDetailsModel)
        if section is not None:
            stmt = stmt.where(ProjectDetailsModel.section == section.value)
        stmt = stmt.order_by(ProjectDetailsModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_latest_for_section(self, section: Section) -> ProjectDetails | None:
        """Get the newest record for a section."""
        stmt = (
            select(ProjectDetailsModel)
            .where(ProjectDetailsModel.section == section.value)
            .order_by(ProjectDetailsModel.created_at.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, details: ProjectDetails) -> ProjectDetails:
        """Create a new record."""
        model = ProjectDetailsModel(
            id=details.id,
            section=details.section.value,
            title=details.title,
            header=details.header,
            description=details.description,
            created_at=details.created_at,
            updated_at=details.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, details: ProjectDetails) -> ProjectDetails:
        """Update an existing record."""
        model = await self._session.get(ProjectDetailsModel, details.id)
        if not model:
            raise ValueError(f"Project details {details.id} not found")

        model.section = details.section.value
        model.title = details.title
        model.header = details.header
        model.description = details.description
        model.updated_at = details.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a record."""
        model = await self._session.get(ProjectDetailsModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: ProjectDetailsModel) -> ProjectDetails:
        """Convert ORM model to domain entity."""
        return ProjectDetails(
            id=model.id,
            section=Section(model.section),
            title=model.title,
            header=model.header,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
