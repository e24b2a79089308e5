"""Header and introduction service layer."""

from collections.abc import Callable, Mapping
from typing import Any
from uuid import UUID

from core.exceptions import HeaderNotFoundError, IntroductionNotFoundError
from domain.entities.header import Header, Introduction
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.patching import apply_changes

HEADER_FIELDS = frozenset({"name", "description"})
INTRODUCTION_FIELDS = frozenset({"title", "header", "description"})


class HeaderService:
    """Service layer for the hero header copy."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, name: str, description: str) -> Header:
        """Create a new header. It becomes the current one."""
        async with self._uow_factory() as uow:
            created = await uow.headers.create(Header(name=name, description=description))
            await uow.commit()
            return created  # type: ignore[no-any-return]

    async def get_all(self) -> list[Header]:
        """Get all headers, most recent first."""
        async with self._uow_factory() as uow:
            return await uow.headers.get_all()  # type: ignore[no-any-return]

    async def get_by_id(self, header_id: UUID) -> Header:
        """Get a specific header."""
        async with self._uow_factory() as uow:
            header = await uow.headers.get(header_id)
            if not header:
                raise HeaderNotFoundError(str(header_id))
            return header

    async def get_current(self) -> Header | None:
        """Get the header currently shown on the site."""
        async with self._uow_factory() as uow:
            return await uow.headers.get_latest()  # type: ignore[no-any-return]

    async def update(self, header_id: UUID, changes: Mapping[str, Any]) -> Header:
        """Partially update a header."""
        async with self._uow_factory() as uow:
            header = await uow.headers.get(header_id)
            if not header:
                raise HeaderNotFoundError(str(header_id))

            apply_changes(header, changes, HEADER_FIELDS)
            updated = await uow.headers.update(header)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def delete(self, header_id: UUID) -> bool:
        """Delete a header."""
        async with self._uow_factory() as uow:
            deleted = await uow.headers.delete(header_id)
            if not deleted:
                raise HeaderNotFoundError(str(header_id))
            await uow.commit()
            return True


class IntroductionService:
    """Service layer for the introduction copy."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, title: str, header: str, description: str) -> Introduction:
        """Create a new introduction. It becomes the current one."""
        async with self._uow_factory() as uow:
            created = await uow.introductions.create(
                Introduction(title=title, header=header, description=description)
            )
            await uow.commit()
            return created  # type: ignore[no-any-return]

    async def get_all(self) -> list[Introduction]:
        """Get all introductions, most recent first."""
        async with self._uow_factory() as uow:
            return await uow.introductions.get_all()  # type: ignore[no-any-return]

    async def get_by_id(self, introduction_id: UUID) -> Introduction:
        """Get a specific introduction."""
        async with self._uow_factory() as uow:
            introduction = await uow.introductions.get(introduction_id)
            if not introduction:
                raise IntroductionNotFoundError(str(introduction_id))
            return introduction

    async def get_current(self) -> Introduction | None:
        """Get the introduction currently shown on the site."""
        async with self._uow_factory() as uow:
            return await uow.introductions.get_latest()  # type: ignore[no-any-return]

    async def update(
        self, introduction_id: UUID, changes: Mapping[str, Any]
    ) -> Introduction:
        """Partially update an introduction."""
        async with self._uow_factory() as uow:
            introduction = await uow.introductions.get(introduction_id)
            if not introduction:
                raise IntroductionNotFoundError(str(introduction_id))

            apply_changes(introduction, changes, INTRODUCTION_FIELDS)
            updated = await uow.introductions.update(introduction)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def delete(self, introduction_id: UUID) -> bool:
        """Delete an introduction."""
        async with self._uow_factory() as uow:
            deleted = await uow.introductions.delete(introduction_id)
            if not deleted:
                raise IntroductionNotFoundError(str(introduction_id))
            await uow.commit()
            return True
