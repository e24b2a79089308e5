"""SQLAlchemy implementation of Skill repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.skill import Skill
from infrastructure.database.models import SkillModel


class SQLAlchemySkillRepository:
    """SQLAlchemy implementation of ISkillRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Skill | None:
        """Get a skill by ID."""
        model = await self._session.get(SkillModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Skill]:
        """Get all skills, most recent first."""
        stmt = select(SkillModel).order_by(SkillModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, skill: Skill) -> Skill:
        """Create a new skill."""
        model = self._to_model(skill)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, skill: Skill) -> Skill:
        """Update an existing skill."""
        model = await self._session.get(SkillModel, skill.id)
        if not model:
            raise ValueError(f"Skill {skill.id} not found")

        model.title = skill.title
        model.description = skill.description
        model.link = skill.link
        model.icon_url = skill.icon_url
        model.icon_file = skill.icon_file

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a skill."""
        model = await self._session.get(SkillModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: SkillModel) -> Skill:
        """Convert ORM model to domain entity."""
        return Skill(
            id=model.id,
            title=model.title,
            description=model.description,
            link=model.link,
            icon_url=model.icon_url,
            icon_file=model.icon_file,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Skill) -> SkillModel:
        """Convert domain entity to ORM model."""
        return SkillModel(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            link=entity.link,
            icon_url=entity.icon_url,
            icon_file=entity.icon_file,
            created_at=entity.created_at,
        )
