"""WorkExperience API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_work_experience_service
from api.v1.schemas.work_experience import (
    DeletedWorkExperienceResponse,
    LatestWorkExperienceResponse,
    WorkExperienceCreate,
    WorkExperienceDetailResponse,
    WorkExperienceListResponse,
    WorkExperienceResponse,
    WorkExperienceUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.work_experience_service import WorkExperienceService

router = APIRouter(prefix="/work-experiences", tags=["work-experiences"])


@router.get("", response_model=WorkExperienceListResponse, summary="List work experience")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_work_experiences(
    request: Request,
    service: WorkExperienceService = Depends(get_work_experience_service),
) -> WorkExperienceListResponse:
    """Get the timeline, most recent first."""
    experiences = await service.get_all()
    return WorkExperienceListResponse(
        data=[WorkExperienceResponse.from_entity(e) for e in experiences]
    )


@router.get(
    "/latest",
    response_model=LatestWorkExperienceResponse,
    summary="Get the latest work experience",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_latest_work_experience(
    request: Request,
    service: WorkExperienceService = Depends(get_work_experience_service),
) -> LatestWorkExperienceResponse:
    """Get the most recently created entry; ``data`` is null when none exists."""
    experience = await service.get_latest()
    return LatestWorkExperienceResponse(
        data=WorkExperienceResponse.from_entity(experience) if experience else None
    )


@router.get(
    "/{experience_id}",
    response_model=WorkExperienceDetailResponse,
    summary="Get a work experience",
    responses={404: {"description": "Work experience not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_work_experience(
    request: Request,
    experience_id: UUID,
    service: WorkExperienceService = Depends(get_work_experience_service),
) -> WorkExperienceDetailResponse:
    experience = await service.get_by_id(experience_id)
    return WorkExperienceDetailResponse(data=WorkExperienceResponse.from_entity(experience))


@router.post(
    "",
    response_model=WorkExperienceDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a work experience",
    responses={
        201: {"description": "Work experience created successfully"},
        400: {"description": "Icon not found or invalid date range"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_work_experience(
    request: Request,
    body: WorkExperienceCreate,
    admin: CurrentAdmin,
    service: WorkExperienceService = Depends(get_work_experience_service),
) -> WorkExperienceDetailResponse:
    experience = await service.create(
        icon=body.icon,
        workplace=body.workplace,
        work_title=body.work_title,
        description=body.description,
        start_date=body.start_date,
        end_date=body.end_date,
        is_current_job=body.is_current_job,
    )
    return WorkExperienceDetailResponse(data=WorkExperienceResponse.from_entity(experience))


@router.patch(
    "/latest",
    response_model=WorkExperienceDetailResponse,
    summary="Update the latest work experience",
    responses={404: {"description": "No work experience exists"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_latest_work_experience(
    request: Request,
    body: WorkExperienceUpdate,
    admin: CurrentAdmin,
    service: WorkExperienceService = Depends(get_work_experience_service),
) -> WorkExperienceDetailResponse:
    experience = await service.update_latest(body.changes())
    return WorkExperienceDetailResponse(data=WorkExperienceResponse.from_entity(experience))


@router.patch(
    "/{experience_id}",
    response_model=WorkExperienceDetailResponse,
    summary="Update a work experience",
    responses={404: {"description": "Work experience not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_work_experience(
    request: Request,
    experience_id: UUID,
    body: WorkExperienceUpdate,
    admin: CurrentAdmin,
    service: WorkExperienceService = Depends(get_work_experience_service),
) -> WorkExperienceDetailResponse:
    """Update only the fields sent in the body; the date rule is re-checked."""
    experience = await service.update(experience_id, body.changes())
    return WorkExperienceDetailResponse(data=WorkExperienceResponse.from_entity(experience))


@router.delete(
    "/latest",
    response_model=DeletedWorkExperienceResponse,
    summary="Delete the latest work experience",
    responses={404: {"description": "No work experience exists"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_latest_work_experience(
    request: Request,
    admin: CurrentAdmin,
    service: WorkExperienceService = Depends(get_work_experience_service),
) -> DeletedWorkExperienceResponse:
    """Delete the most recent entry and its icon; returns the deleted id."""
    deleted_id = await service.delete_latest()
    return DeletedWorkExperienceResponse(id=deleted_id)


@router.delete(
    "/{experience_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a work experience",
    responses={404: {"description": "Work experience not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_work_experience(
    request: Request,
    experience_id: UUID,
    admin: CurrentAdmin,
    service: WorkExperienceService = Depends(get_work_experience_service),
) -> None:
    """Delete an entry together with its icon file."""
    await service.delete(experience_id)
    return None
