"""SQLAlchemy implementation of Technology repository."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.technology import Technology
from infrastructure.database.models import TechnologyModel


class SQLAlchemyTechnologyRepository:
    """SQLAlchemy implementation of ITechnologyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Technology | None:
        """Get a technology by ID."""
        model = await self._session.get(TechnologyModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self, visible_only: bool = False) -> list[Technology]:
        """Get technologies in creation order."""
        stmt = select(TechnologyModel)
        if visible_only:
            stmt = stmt.where(TechnologyModel.is_visible.is_(True))
        stmt = stmt.order_by(TechnologyModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_max_order(self) -> int | None:
        """Get the highest order value (missing counts as 0), None if empty."""
        stmt = select(
            func.count(TechnologyModel.id),
            func.max(func.coalesce(TechnologyModel.order, 0)),
        )
        result = await self._session.execute(stmt)
        count, max_order = result.one()
        if not count:
            return None
        return int(max_order or 0)

    async def create(self, technology: Technology) -> Technology:
        """Create a new technology."""
        model = self._to_model(technology)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def create_many(self, technologies: list[Technology]) -> list[Technology]:
        """Create several technologies in one flush."""
        models = [self._to_model(tech) for tech in technologies]
        self._session.add_all(models)
        await self._session.flush()
        return [self._to_entity(model) for model in models]

    async def update(self, technology: Technology) -> Technology:
        """Update an existing technology."""
        model = await self._session.get(TechnologyModel, technology.id)
        if not model:
            raise ValueError(f"Technology {technology.id} not found")

        model.name = technology.name
        model.icon = technology.icon
        model.is_visible = technology.is_visible
        model.order = technology.order

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a technology."""
        model = await self._session.get(TechnologyModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: TechnologyModel) -> Technology:
        """Convert ORM model to domain entity."""
        return Technology(
            id=model.id,
            name=model.name,
            icon=model.icon,
            is_visible=model.is_visible,
            order=model.order,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Technology) -> TechnologyModel:
        """Convert domain entity to ORM model."""
        return TechnologyModel(
            id=entity.id,
            name=entity.name,
            icon=entity.icon,
            is_visible=entity.is_visible,
            order=entity.order,
            created_at=entity.created_at,
        )
