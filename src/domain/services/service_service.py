"""Service offering service layer."""

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import DomainValidationError, ServiceNotFoundError
from domain.entities.service import (
    Service,
    ServiceCategory,
    ServicePage,
    ServiceWithIcon,
)
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.patching import apply_changes
from domain.services.storage_service import StorageService

logger = structlog.get_logger()

SERVICE_FIELDS = frozenset(
    {
        "title",
        "icon",
        "subtitle",
        "badge_text",
        "accent_color",
        "description",
        "key_features",
        "technologies",
        "experience_level",
        "project_count",
        "cta_text",
        "cta_link",
        "starting_price",
        "currency",
        "price_type",
        "delivery_time",
        "category",
        "display_order",
        "is_active",
    }
)

DEFAULT_PAGE_SIZE = 10
DEFAULT_FEATURED_LIMIT = 3


def encode_cursor(created_at: datetime) -> str:
    """Encode a creation time as an opaque pagination cursor."""
    return created_at.isoformat()


def decode_cursor(cursor: str) -> datetime:
    """Decode a pagination cursor produced by encode_cursor.

    Creation times are stored naive in UTC, so an aware cursor is converted.
    """
    try:
        value = datetime.fromisoformat(cursor)
    except ValueError as e:
        raise DomainValidationError(
            "Invalid pagination cursor", details={"cursor": cursor}
        ) from e
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class ServiceService:
    """Service layer for Service flip cards.

    Deleting a service is a soft delete: the record stays, ``is_active`` is
    cleared and public listings stop showing it. Admin listings include
    inactive services.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        storage: StorageService,
    ) -> None:
        self._uow_factory = uow_factory
        self._storage = storage

    async def create(self, **fields: Any) -> ServiceWithIcon:
        """Create an active service. ``icon`` must reference an uploaded blob."""
        unknown = sorted(set(fields) - (SERVICE_FIELDS - {"is_active"}))
        if unknown:
            raise DomainValidationError(
                f"Unknown service fields: {', '.join(unknown)}",
                details={"fields": unknown},
            )

        async with self._uow_factory() as uow:
            fields["icon"] = await self._storage.require(uow, fields["icon"])
            service = Service(**fields)
            created = await uow.services.create(service)
            await uow.commit()
            return await self._with_icon(uow, created)

    async def get_active(self) -> list[ServiceWithIcon]:
        """Get active services by display order (public listing)."""
        async with self._uow_factory() as uow:
            services = await uow.services.get_all(active_only=True)
            return [await self._with_icon(uow, service) for service in services]

    async def get_all(self) -> list[ServiceWithIcon]:
        """Get every service, including inactive ones (admin listing)."""
        async with self._uow_factory() as uow:
            services = await uow.services.get_all(active_only=False)
            return [await self._with_icon(uow, service) for service in services]

    async def get_by_category(self, category: ServiceCategory) -> list[ServiceWithIcon]:
        """Get active services in a category by display order."""
        async with self._uow_factory() as uow:
            services = await uow.services.get_all(active_only=True, category=category)
            return [await self._with_icon(uow, service) for service in services]

    async def get_by_id(self, service_id: UUID) -> ServiceWithIcon:
        """Get a specific service, active or not."""
        async with self._uow_factory() as uow:
            service = await uow.services.get(service_id)
            if not service:
                raise ServiceNotFoundError(str(service_id))
            return await self._with_icon(uow, service)

    async def get_page(
        self, limit: int = DEFAULT_PAGE_SIZE, cursor: str | None = None
    ) -> ServicePage:
        """Get one page of services, newest first (admin listing).

        The cursor is the creation time of the last item on the previous page.
        """
        before = decode_cursor(cursor) if cursor else None
        async with self._uow_factory() as uow:
            services = await uow.services.get_page(limit + 1, before)
            has_more = len(services) > limit
            items = services[:limit]
            return ServicePage(
                items=[await self._with_icon(uow, service) for service in items],
                has_more=has_more,
                next_cursor=encode_cursor(items[-1].created_at) if has_more else None,
            )

    async def count_by_category(self) -> dict[str, int]:
        """Count active services per category."""
        async with self._uow_factory() as uow:
            return await uow.services.count_by_category(active_only=True)  # type: ignore[no-any-return]

    async def get_featured(self, limit: int = DEFAULT_FEATURED_LIMIT) -> list[ServiceWithIcon]:
        """Get active services with a badge, by display order."""
        async with self._uow_factory() as uow:
            services = await uow.services.get_featured(limit)
            return [await self._with_icon(uow, service) for service in services]

    async def search(
        self, term: str, category: ServiceCategory | None = None
    ) -> list[ServiceWithIcon]:
        """Search active services by substring of title, description,
        technologies or key features."""
        async with self._uow_factory() as uow:
            services = await uow.services.get_all(active_only=True, category=category)
            return [
                await self._with_icon(uow, service)
                for service in services
                if service.matches(term)
            ]

    async def update(
        self, service_id: UUID, changes: Mapping[str, Any]
    ) -> ServiceWithIcon:
        """Partially update a service and stamp updated_at."""
        async with self._uow_factory() as uow:
            service = await uow.services.get(service_id)
            if not service:
                raise ServiceNotFoundError(str(service_id))

            changes = dict(changes)
            if "icon" in changes:
                changes["icon"] = await self._storage.require(uow, changes["icon"])

            apply_changes(service, changes, SERVICE_FIELDS)
            service.updated_at = datetime.utcnow()

            updated = await uow.services.update(service)
            await uow.commit()
            return await self._with_icon(uow, updated)

    async def delete(self, service_id: UUID) -> ServiceWithIcon:
        """Soft-delete a service by marking it inactive."""
        async with self._uow_factory() as uow:
            service = await uow.services.get(service_id)
            if not service:
                raise ServiceNotFoundError(str(service_id))

            service.deactivate()
            updated = await uow.services.update(service)
            await uow.commit()

            logger.info("service_soft_deleted", service_id=str(service_id))
            return await self._with_icon(uow, updated)

    async def _with_icon(self, uow: IUnitOfWork, service: Service) -> ServiceWithIcon:
        icon_url = await self._storage.resolve(service.icon, uow)
        return ServiceWithIcon(service=service, icon_url=icon_url)
