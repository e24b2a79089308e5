"""Technology API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_technology_service
from api.v1.schemas.technology import (
    TechnologyBulkCreate,
    TechnologyCreate,
    TechnologyDetailResponse,
    TechnologyListResponse,
    TechnologyResponse,
    TechnologyUpdate,
    TechnologyVisibility,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.technology_service import NewTechnology, TechnologyService

router = APIRouter(prefix="/technologies", tags=["technologies"])


@router.get("", response_model=TechnologyListResponse, summary="List technologies")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_technologies(
    request: Request,
    service: TechnologyService = Depends(get_technology_service),
) -> TechnologyListResponse:
    """Get all technologies, hidden ones included, by order."""
    technologies = await service.get_all()
    return TechnologyListResponse(data=[TechnologyResponse.from_entity(t) for t in technologies])


@router.get("/visible", response_model=TechnologyListResponse, summary="List visible technologies")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_visible_technologies(
    request: Request,
    service: TechnologyService = Depends(get_technology_service),
) -> TechnologyListResponse:
    """Get the technologies shown on the site, by order."""
    technologies = await service.get_visible()
    return TechnologyListResponse(data=[TechnologyResponse.from_entity(t) for t in technologies])


@router.get(
    "/{technology_id}",
    response_model=TechnologyDetailResponse,
    summary="Get a technology",
    responses={404: {"description": "Technology not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_technology(
    request: Request,
    technology_id: UUID,
    service: TechnologyService = Depends(get_technology_service),
) -> TechnologyDetailResponse:
    technology = await service.get_by_id(technology_id)
    return TechnologyDetailResponse(data=TechnologyResponse.from_entity(technology))


@router.post(
    "",
    response_model=TechnologyDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a technology",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_technology(
    request: Request,
    body: TechnologyCreate,
    admin: CurrentAdmin,
    service: TechnologyService = Depends(get_technology_service),
) -> TechnologyDetailResponse:
    """Create a technology. Without ``order`` it goes after the current last one."""
    technology = await service.create(
        name=body.name,
        icon=body.icon,
        is_visible=body.is_visible,
        order=body.order,
    )
    return TechnologyDetailResponse(data=TechnologyResponse.from_entity(technology))


@router.post(
    "/bulk",
    response_model=TechnologyListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create several technologies",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def bulk_create_technologies(
    request: Request,
    body: TechnologyBulkCreate,
    admin: CurrentAdmin,
    service: TechnologyService = Depends(get_technology_service),
) -> TechnologyListResponse:
    """Insert all items in one transaction. A missing order defaults to the item's index."""
    technologies = await service.bulk_insert(
        [
            NewTechnology(
                name=item.name,
                icon=item.icon,
                is_visible=item.is_visible,
                order=item.order,
            )
            for item in body.items
        ]
    )
    return TechnologyListResponse(data=[TechnologyResponse.from_entity(t) for t in technologies])


@router.put(
    "/{technology_id}/visibility",
    response_model=TechnologyDetailResponse,
    summary="Show or hide a technology",
    responses={404: {"description": "Technology not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def set_technology_visibility(
    request: Request,
    technology_id: UUID,
    body: TechnologyVisibility,
    admin: CurrentAdmin,
    service: TechnologyService = Depends(get_technology_service),
) -> TechnologyDetailResponse:
    """Idempotent: sending the current value changes nothing."""
    technology = await service.set_visibility(technology_id, body.is_visible)
    return TechnologyDetailResponse(data=TechnologyResponse.from_entity(technology))


@router.patch(
    "/{technology_id}",
    response_model=TechnologyDetailResponse,
    summary="Update a technology",
    responses={404: {"description": "Technology not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_technology(
    request: Request,
    technology_id: UUID,
    body: TechnologyUpdate,
    admin: CurrentAdmin,
    service: TechnologyService = Depends(get_technology_service),
) -> TechnologyDetailResponse:
    """Update only the fields sent in the body."""
    technology = await service.update(technology_id, body.changes())
    return TechnologyDetailResponse(data=TechnologyResponse.from_entity(technology))


@router.delete(
    "/{technology_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a technology",
    responses={404: {"description": "Technology not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_technology(
    request: Request,
    technology_id: UUID,
    admin: CurrentAdmin,
    service: TechnologyService = Depends(get_technology_service),
) -> None:
    await service.delete(technology_id)
    return None
