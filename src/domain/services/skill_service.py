"""Skill service layer."""

from collections.abc import Callable, Mapping
from typing import Any
from uuid import UUID

from core.exceptions import MissingIconSourceError, SkillNotFoundError
from domain.entities.skill import Skill, SkillWithIcon
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.patching import apply_changes
from domain.services.storage_service import StorageService

SKILL_FIELDS = frozenset({"title", "description", "link", "icon_url", "icon_file"})


class SkillService:
    """Service layer for Skill cards."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        storage: StorageService,
    ) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def create(
        self,
        title: str,
        description: str,
        link: str,
        icon_url: str | None = None,
        icon_file: str | None = None,
    ) -> SkillWithIcon:
        """Create a skill. At least one icon source is required."""
        icon_url = icon_url or None
        icon_file = icon_file or None
        if not icon_url and not icon_file:
            raise MissingIconSourceError()

        async with self._uow_factory() as uow:
            if icon_file:
                icon_file = await self._storage.require(uow, icon_file)

            skill = Skill(
                title=title,
                description=description,
                link=link,
                icon_url=icon_url,
                icon_file=icon_file,
            )
            created = await uow.skills.create(skill)
            await uow.commit()
            return await self._with_icon(uow, created)

    async def get_all(self) -> list[SkillWithIcon]:
        """Get all skills, most recent first, with icons resolved."""
        async with self._uow_factory() as uow:
            skills = await uow.skills.get_all()
            return [await self._with_icon(uow, skill) for skill in skills]

    async def get_by_id(self, skill_id: UUID) -> SkillWithIcon:
        """Get a specific skill with its icon resolved."""
        async with self._uow_factory() as uow:
            skill = await uow.skills.get(skill_id)
            if not skill:
                raise SkillNotFoundError(str(skill_id))
            return await self._with_icon(uow, skill)

    async def update(self, skill_id: UUID, changes: Mapping[str, Any]) -> SkillWithIcon:
        """Partially update a skill; the result must still have an icon source."""
        async with self._uow_factory() as uow:
            skill = await uow.skills.get(skill_id)
            if not skill:
                raise SkillNotFoundError(str(skill_id))

            changes = dict(changes)
            if changes.get("icon_file"):
                changes["icon_file"] = await self._storage.require(uow, changes["icon_file"])
            for field in ("icon_url", "icon_file"):
                if field in changes and not changes[field]:
                    changes[field] = None

            apply_changes(skill, changes, SKILL_FIELDS)
            if not skill.has_icon_source:
                raise MissingIconSourceError()

            updated = await uow.skills.update(skill)
            await uow.commit()
            return await self._with_icon(uow, updated)

    async def delete(self, skill_id: UUID) -> bool:
        """Delete a skill. An uploaded icon is left for the orphan sweep."""
        async with self._uow_factory() as uow:
            deleted = await uow.skills.delete(skill_id)
            if not deleted:
                raise SkillNotFoundError(str(skill_id))
            await uow.commit()
            return True

    async def _with_icon(self, uow: IUnitOfWork, skill: Skill) -> SkillWithIcon:
        """Resolve the icon. An uploaded file wins over the external URL."""
        icon = None
        if skill.icon_file:
            icon = await self._storage.resolve(skill.icon_file, uow)
        return SkillWithIcon(skill=skill, resolved_icon_url=icon or skill.icon_url)
