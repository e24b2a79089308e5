"""Technology service layer."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from core.exceptions import TechnologyNotFoundError
from domain.entities.technology import Technology, TechnologyWithIcon, sort_by_order
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.patching import apply_changes
from domain.services.storage_service import StorageService, parse_reference

TECHNOLOGY_FIELDS = frozenset({"name", "icon", "is_visible", "order"})


@dataclass(frozen=True, slots=True)
class NewTechnology:
    """Input row for bulk insert."""

    name: str
    icon: str
    is_visible: bool = True
    order: int | None = None


class TechnologyService:
    """Service layer for the technology badge wall."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        storage: StorageService,
    ) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def create(
        self,
        name: str,
        icon: str,
        is_visible: bool = True,
        order: int | None = None,
    ) -> TechnologyWithIcon:
        """Create a technology.

        Without an explicit order it is placed after the current highest one.
        """
        async with self._uow_factory() as uow:
            icon = await self._checked_icon(uow, icon)
            if order is None:
                max_order = await uow.technologies.get_max_order()
                order = 0 if max_order is None else max_order + 1

            created = await uow.technologies.create(
                Technology(name=name, icon=icon, is_visible=is_visible, order=order)
            )
            await uow.commit()
            return await self._with_icon(uow, created)

    async def bulk_insert(self, rows: list[NewTechnology]) -> list[TechnologyWithIcon]:
        """Insert several technologies; a missing order defaults to the row index."""
        async with self._uow_factory() as uow:
            technologies = [
                Technology(
                    name=row.name,
                    icon=await self._checked_icon(uow, row.icon),
                    is_visible=row.is_visible,
                    order=row.order if row.order is not None else index,
                )
                for index, row in enumerate(rows)
            ]
            created = await uow.technologies.create_many(technologies)
            await uow.commit()
            return [await self._with_icon(uow, tech) for tech in created]

    async def get_all(self) -> list[TechnologyWithIcon]:
        """Get all technologies sorted by order (missing order counts as 0)."""
        async with self._uow_factory() as uow:
            technologies = sort_by_order(await uow.technologies.get_all())
            return [await self._with_icon(uow, tech) for tech in technologies]

    async def get_visible(self) -> list[TechnologyWithIcon]:
        """Get visible technologies sorted by order."""
        async with self._uow_factory() as uow:
            technologies = sort_by_order(
                await uow.technologies.get_all(visible_only=True)
            )
            return [await self._with_icon(uow, tech) for tech in technologies]

    async def get_by_id(self, technology_id: UUID) -> TechnologyWithIcon:
        """Get a specific technology."""
        async with self._uow_factory() as uow:
            technology = await uow.technologies.get(technology_id)
            if not technology:
                raise TechnologyNotFoundError(str(technology_id))
            return await self._with_icon(uow, technology)

    async def set_visibility(
        self, technology_id: UUID, is_visible: bool
    ) -> TechnologyWithIcon:
        """Show or hide a technology. Setting the current value is a no-op."""
        async with self._uow_factory() as uow:
            technology = await uow.technologies.get(technology_id)
            if not technology:
                raise TechnologyNotFoundError(str(technology_id))

            if technology.is_visible != is_visible:
                technology.is_visible = is_visible
                technology = await uow.technologies.update(technology)
                await uow.commit()
            return await self._with_icon(uow, technology)

    async def update(
        self, technology_id: UUID, changes: Mapping[str, Any]
    ) -> TechnologyWithIcon:
        """Partially update a technology."""
        async with self._uow_factory() as uow:
            technology = await uow.technologies.get(technology_id)
            if not technology:
                raise TechnologyNotFoundError(str(technology_id))

            changes = dict(changes)
            if "icon" in changes:
                changes["icon"] = await self._checked_icon(uow, changes["icon"])

            apply_changes(technology, changes, TECHNOLOGY_FIELDS)
            updated = await uow.technologies.update(technology)
            await uow.commit()
            return await self._with_icon(uow, updated)

    async def delete(self, technology_id: UUID) -> bool:
        """Delete a technology."""
        async with self._uow_factory() as uow:
            deleted = await uow.technologies.delete(technology_id)
            if not deleted:
                raise TechnologyNotFoundError(str(technology_id))
            await uow.commit()
            return True

    async def _checked_icon(self, uow: IUnitOfWork, icon: str) -> str:
        """Storage references must exist; literal paths and URLs pass through."""
        if parse_reference(icon) is None:
            return icon
        return await self._storage.require(uow, icon)

    async def _with_icon(
        self, uow: IUnitOfWork, technology: Technology
    ) -> TechnologyWithIcon:
        icon_url = await self._storage.resolve_icon(technology.icon, uow)
        return TechnologyWithIcon(technology=technology, icon_url=icon_url)
