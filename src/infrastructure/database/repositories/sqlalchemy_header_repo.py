"""SQLAlchemy implementations of Header and Introduction repositories."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.header import Header, Introduction
from infrastructure.database.models import HeaderModel, IntroductionModel


class SQLAlchemyHeaderRepository:
    """SQLAlchemy implementation of IHeaderRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Header | None:
        """Get a header by ID."""
        model = await self._session.get(HeaderModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Header]:
        """Get all headers, most recent first."""
        stmt = select(HeaderModel).order_by(HeaderModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_latest(self) -> Header | None:
        """Get the most recently created header."""
        stmt = select(HeaderModel).order_by(HeaderModel.created_at.desc()).limit(1)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, header: Header) -> Header:
        """Create a new header."""
        model = HeaderModel(
            id=header.id,
            name=header.name,
            description=header.description,
            created_at=header.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, header: Header) -> Header:
        """Update an existing header."""
        model = await self._session.get(HeaderModel, header.id)
        if not model:
            raise ValueError(f"Header {header.id} not found")

        model.name = header.name
        model.description = header.description

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a header."""
        model = await self._session.get(HeaderModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: HeaderModel) -> Header:
        """Convert ORM model to domain entity."""
        return Header(
            id=model.id,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
        )


class SQLAlchemyIntroductionRepository:
    """SQLAlchemy implementation of IIntroductionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Introduction | None:
        """Get an introduction by ID."""
        model = await self._session.get(IntroductionModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Introduction]:
        """Get all introductions, most recent first."""
        stmt = select(IntroductionModel).order_by(IntroductionModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_latest(self) -> Introduction | None:
        """Get the most recently created introduction."""
        stmt = (
            select(IntroductionModel)
            .order_by(IntroductionModel.created_at.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, introduction: Introduction) -> Introduction:
        """Create a new introduction."""
        model = IntroductionModel(
            id=introduction.id,
            title=introduction.title,
            header=introduction.header,
            description=introduction.description,
            created_at=introduction.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, introduction: Introduction) -> Introduction:
        """Update an existing introduction."""
        model = await self._session.get(IntroductionModel, introduction.id)
        if not model:
            raise ValueError(f"Introduction {introduction.id} not found")

        model.title = introduction.title
        model.header = introduction.header
        model.description = introduction.description

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete an introduction."""
        model = await self._session.get(IntroductionModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: IntroductionModel) -> Introduction:
        """Convert ORM model to domain entity."""
        return Introduction(
            id=model.id,
            title=model.title,
            header=model.header,
            description=model.description,
            created_at=model.created_at,
        )
