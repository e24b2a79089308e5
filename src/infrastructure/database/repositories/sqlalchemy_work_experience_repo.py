"""SQLAlchemy implementation of WorkExperience repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.work_experience import WorkExperience
from infrastructure.database.models import WorkExperienceModel


class SQLAlchemyWorkExperienceRepository:
    """SQLAlchemy implementation of IWorkExperienceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> WorkExperience | None:
        """Get a work experience by ID."""
        model = await self._session.get(WorkExperienceModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[WorkExperience]:
        """Get all work experiences, most recent first."""
        stmt = select(WorkExperienceModel).order_by(WorkExperienceModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_latest(self) -> WorkExperience | None:
        """Get the most recently created work experience."""
        stmt = (
            select(WorkExperienceModel)
            .order_by(WorkExperienceModel.created_at.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, experience: WorkExperience) -> WorkExperience:
        """Create a new work experience."""
        model = self._to_model(experience)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, experience: WorkExperience) -> WorkExperience:
        """Update an existing work experience."""
        model = await self._session.get(WorkExperienceModel, experience.id)
        if not model:
            raise ValueError(f"Work experience {experience.id} not found")

        model.icon = experience.icon
        model.workplace = experience.workplace
        model.work_title = experience.work_title
        model.description = experience.description
        model.start_date = experience.start_date
        model.end_date = experience.end_date
        model.is_current_job = experience.is_current_job

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a work experience."""
        model = await self._session.get(WorkExperienceModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: WorkExperienceModel) -> WorkExperience:
        """Convert ORM model to domain entity."""
        return WorkExperience(
            id=model.id,
            icon=model.icon,
            workplace=model.workplace,
            work_title=model.work_title,
            description=model.description,
            start_date=model.start_date,
            end_date=model.end_date,
            is_current_job=model.is_current_job,
            created_at=model.created_at,
        )

    def _to_model(self, entity: WorkExperience) -> WorkExperienceModel:
        """Convert domain entity to ORM model."""
        return WorkExperienceModel(
            id=entity.id,
            icon=entity.icon,
            workplace=entity.workplace,
            work_title=entity.work_title,
            description=entity.description,
            start_date=entity.start_date,
            end_date=entity.end_date,
            is_current_job=entity.is_current_job,
            created_at=entity.created_at,
        )
