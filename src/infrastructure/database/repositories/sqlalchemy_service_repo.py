"""SQLAlchemy implementation of Service repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.service import (
    ExperienceLevel,
    PriceType,
    Service,
    ServiceCategory,
)
from infrastructure.database.models import ServiceModel

# Columns copied verbatim between entity and model
_PLAIN_COLUMNS = (
    "title",
    "icon",
    "subtitle",
    "badge_text",
    "accent_color",
    "description",
    "key_features",
    "technologies",
    "project_count",
    "cta_text",
    "cta_link",
    "starting_price",
    "currency",
    "delivery_time",
    "is_active",
    "display_order",
    "updated_at",
)


class SQLAlchemyServiceRepository:
    """SQLAlchemy implementation of IServiceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Service | None:
        """Get a service by ID."""
        model = await self._session.get(ServiceModel, id)
        return self._to_entity(model) if model else None

    async def get_all(
        self,
        active_only: bool = False,
        category: ServiceCategory | None = None,
    ) -> list[Service]:
        """Get services ordered by display order, then creation time."""
        stmt = select(ServiceModel)
        if active_only:
            stmt = stmt.where(ServiceModel.is_active.is_(True))
        if category is not None:
            stmt = stmt.where(ServiceModel.category == category.value)
        stmt = stmt.order_by(ServiceModel.display_order, ServiceModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_featured(self, limit: int) -> list[Service]:
        """Get active services that carry a badge, by display order."""
        stmt = (
            select(ServiceModel)
            .where(
                ServiceModel.is_active.is_(True),
                ServiceModel.badge_text.is_not(None),
            )
            .order_by(ServiceModel.display_order, ServiceModel.created_at)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_page(
        self, limit: int, before: datetime | None = None
    ) -> list[Service]:
        """Get services newest first, created strictly before the cursor."""
        stmt = select(ServiceModel)
        if before is not None:
            stmt = stmt.where(ServiceModel.created_at < before)
        stmt = stmt.order_by(ServiceModel.created_at.desc()).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def count_by_category(self, active_only: bool = True) -> dict[str, int]:
        """Count services per category."""
        stmt = select(ServiceModel.category, func.count().label("service_count"))
        if active_only:
            stmt = stmt.where(ServiceModel.is_active.is_(True))
        stmt = stmt.group_by(ServiceModel.category)
        result = await self._session.execute(stmt)
        return {row.category: row.service_count for row in result}

    async def create(self, service: Service) -> Service:
        """Create a new service."""
        model = self._to_model(service)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, service: Service) -> Service:
        """Update an existing service."""
        model = await self._session.get(ServiceModel, service.id)
        if not model:
            raise ValueError(f"Service {service.id} not found")

        for column in _PLAIN_COLUMNS:
            setattr(model, column, getattr(service, column))
        model.experience_level = service.experience_level.value
        model.category = service.category.value
        model.price_type = service.price_type.value if service.price_type else None

        await self._session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: ServiceModel) -> Service:
        """Convert ORM model to domain entity."""
        return Service(
            id=model.id,
            experience_level=ExperienceLevel(model.experience_level),
            category=ServiceCategory(model.category),
            price_type=PriceType(model.price_type) if model.price_type else None,
            created_at=model.created_at,
            **{column: getattr(model, column) for column in _PLAIN_COLUMNS},
        )

    def _to_model(self, entity: Service) -> ServiceModel:
        """Convert domain entity to ORM model."""
        return ServiceModel(
            id=entity.id,
            experience_level=entity.experience_level.value,
            category=entity.category.value,
            price_type=entity.price_type.value if entity.price_type else None,
            created_at=entity.created_at,
            **{column: getattr(entity, column) for column in _PLAIN_COLUMNS},
        )
