"""ProjectDetails (section copy) API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_project_details_service
from api.v1.schemas.project_details import (
    ProjectDetailsCreate,
    ProjectDetailsDetailResponse,
    ProjectDetailsListResponse,
    ProjectDetailsResponse,
    ProjectDetailsUpdate,
    SectionDetailsResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.project_details import Section
from domain.services.project_details_service import ProjectDetailsService

router = APIRouter(prefix="/project-details", tags=["project-details"])


@router.get("", response_model=ProjectDetailsListResponse, summary="List section copy")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_project_details(
    request: Request,
    section: Section | None = None,
    service: ProjectDetailsService = Depends(get_project_details_service),
) -> ProjectDetailsListResponse:
    """Get all section copy records, most recent first, optionally for one section."""
    records = await service.get_all(section)
    return ProjectDetailsListResponse(
        data=[ProjectDetailsResponse.model_validate(r) for r in records]
    )


@router.get(
    "/sections/{section}",
    response_model=SectionDetailsResponse,
    summary="Get the copy shown for a section",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_section_details(
    request: Request,
    section: Section,
    service: ProjectDetailsService = Depends(get_project_details_service),
) -> SectionDetailsResponse:
    """Get the newest record for a section; ``data`` is null when none exists."""
    record = await service.get_for_section(section)
    return SectionDetailsResponse(
        data=ProjectDetailsResponse.model_validate(record) if record else None
    )


@router.get(
    "/{details_id}",
    response_model=ProjectDetailsDetailResponse,
    summary="Get section copy",
    responses={404: {"description": "Record not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_project_details(
    request: Request,
    details_id: UUID,
    service: ProjectDetailsService = Depends(get_project_details_service),
) -> ProjectDetailsDetailResponse:
    record = await service.get_by_id(details_id)
    return ProjectDetailsDetailResponse(data=ProjectDetailsResponse.model_validate(record))


@router.post(
    "",
    response_model=ProjectDetailsDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create section copy",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_project_details(
    request: Request,
    body: ProjectDetailsCreate,
    admin: CurrentAdmin,
    service: ProjectDetailsService = Depends(get_project_details_service),
) -> ProjectDetailsDetailResponse:
    record = await service.create(
        section=body.section,
        title=body.title,
        header=body.header,
        description=body.description,
    )
    return ProjectDetailsDetailResponse(data=ProjectDetailsResponse.model_validate(record))


@router.patch(
    "/{details_id}",
    response_model=ProjectDetailsDetailResponse,
    summary="Update section copy",
    responses={404: {"description": "Record not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_project_details(
    request: Request,
    details_id: UUID,
    body: ProjectDetailsUpdate,
    admin: CurrentAdmin,
    service: ProjectDetailsService = Depends(get_project_details_service),
) -> ProjectDetailsDetailResponse:
    """Update only the fields sent in the body."""
    record = await service.update(details_id, body.changes())
    return ProjectDetailsDetailResponse(data=ProjectDetailsResponse.model_validate(record))


@router.delete(
    "/{details_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete section copy",
    responses={404: {"description": "Record not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_project_details(
    request: Request,
    details_id: UUID,
    admin: CurrentAdmin,
    service: ProjectDetailsService = Depends(get_project_details_service),
) -> None:
    await service.delete(details_id)
    return None
