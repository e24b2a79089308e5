"""Service offering API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_service_service
from api.v1.schemas.service import (
    ServiceCountsResponse,
    ServiceCreate,
    ServiceDetailResponse,
    ServiceListResponse,
    ServicePageResponse,
    ServiceResponse,
    ServiceUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.service import ServiceCategory
from domain.services.service_service import (
    DEFAULT_FEATURED_LIMIT,
    DEFAULT_PAGE_SIZE,
    ServiceService,
)

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=ServiceListResponse, summary="List active services")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_active_services(
    request: Request,
    service: ServiceService = Depends(get_service_service),
) -> ServiceListResponse:
    """Get active services by display order."""
    services = await service.get_active()
    return ServiceListResponse(data=[ServiceResponse.from_entity(s) for s in services])


@router.get("/all", response_model=ServiceListResponse, summary="List all services")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_all_services(
    request: Request,
    admin: CurrentAdmin,
    service: ServiceService = Depends(get_service_service),
) -> ServiceListResponse:
    """Get every service by display order, including inactive ones."""
    services = await service.get_all()
    return ServiceListResponse(data=[ServiceResponse.from_entity(s) for s in services])


@router.get("/page", response_model=ServicePageResponse, summary="Page through services")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_services_page(
    request: Request,
    admin: CurrentAdmin,
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    cursor: str | None = Query(None, description="next_cursor from the previous page"),
    service: ServiceService = Depends(get_service_service),
) -> ServicePageResponse:
    """Get services newest first, one page at a time."""
    page = await service.get_page(limit=limit, cursor=cursor)
    return ServicePageResponse.from_page(page)


@router.get("/featured", response_model=ServiceListResponse, summary="List featured services")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_featured_services(
    request: Request,
    limit: int = Query(DEFAULT_FEATURED_LIMIT, ge=1, le=20),
    service: ServiceService = Depends(get_service_service),
) -> ServiceListResponse:
    """Get active services that carry a badge."""
    services = await service.get_featured(limit)
    return ServiceListResponse(data=[ServiceResponse.from_entity(s) for s in services])


@router.get("/counts", response_model=ServiceCountsResponse, summary="Count services by category")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def count_services(
    request: Request,
    service: ServiceService = Depends(get_service_service),
) -> ServiceCountsResponse:
    """Count active services per category."""
    return ServiceCountsResponse(data=await service.count_by_category())


@router.get("/search", response_model=ServiceListResponse, summary="Search services")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def search_services(
    request: Request,
    q: str = Query(..., min_length=1, max_length=100),
    category: ServiceCategory | None = None,
    service: ServiceService = Depends(get_service_service),
) -> ServiceListResponse:
    """Case-insensitive search over title, description, technologies and key features."""
    services = await service.search(q, category)
    return ServiceListResponse(data=[ServiceResponse.from_entity(s) for s in services])


@router.get(
    "/category/{category}",
    response_model=ServiceListResponse,
    summary="List services in a category",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_services_by_category(
    request: Request,
    category: ServiceCategory,
    service: ServiceService = Depends(get_service_service),
) -> ServiceListResponse:
    """Get active services in a category by display order."""
    services = await service.get_by_category(category)
    return ServiceListResponse(data=[ServiceResponse.from_entity(s) for s in services])


@router.get(
    "/{service_id}",
    response_model=ServiceDetailResponse,
    summary="Get a service",
    responses={404: {"description": "Service not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_service(
    request: Request,
    service_id: UUID,
    service: ServiceService = Depends(get_service_service),
) -> ServiceDetailResponse:
    item = await service.get_by_id(service_id)
    return ServiceDetailResponse(data=ServiceResponse.from_entity(item))


@router.post(
    "",
    response_model=ServiceDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a service",
    responses={
        201: {"description": "Service created successfully"},
        400: {"description": "Icon not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_service(
    request: Request,
    body: ServiceCreate,
    admin: CurrentAdmin,
    service: ServiceService = Depends(get_service_service),
) -> ServiceDetailResponse:
    """Create an active service. Upload the icon first and pass its storage id."""
    item = await service.create(**body.model_dump())
    return ServiceDetailResponse(data=ServiceResponse.from_entity(item))


@router.patch(
    "/{service_id}",
    response_model=ServiceDetailResponse,
    summary="Update a service",
    responses={404: {"description": "Service not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_service(
    request: Request,
    service_id: UUID,
    body: ServiceUpdate,
    admin: CurrentAdmin,
    service: ServiceService = Depends(get_service_service),
) -> ServiceDetailResponse:
    """Update only the fields sent in the body. Set is_active to restore a service."""
    item = await service.update(service_id, body.changes())
    return ServiceDetailResponse(data=ServiceResponse.from_entity(item))


@router.delete(
    "/{service_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Deactivate a service",
    responses={404: {"description": "Service not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_service(
    request: Request,
    service_id: UUID,
    admin: CurrentAdmin,
    service: ServiceService = Depends(get_service_service),
) -> None:
    """Soft delete: the service is hidden from public listings but kept."""
    await service.delete(service_id)
    return None
