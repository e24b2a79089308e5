"""Project API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_project_service
from api.v1.schemas.project import (
    ProjectCreate,
    ProjectDetailResponse,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.project_service import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=ProjectListResponse, summary="List projects")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_projects(
    request: Request,
    tag: str | None = Query(None, min_length=1, description="Only projects with this tag"),
    service: ProjectService = Depends(get_project_service),
) -> ProjectListResponse:
    """Get projects, most recent first, with image URLs."""
    if tag:
        projects = await service.get_by_tag(tag)
    else:
        projects = await service.get_all()
    return ProjectListResponse(data=[ProjectResponse.from_entity(p) for p in projects])


@router.get(
    "/{project_id}",
    response_model=ProjectDetailResponse,
    summary="Get a project",
    responses={404: {"description": "Project not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_project(
    request: Request,
    project_id: UUID,
    service: ProjectService = Depends(get_project_service),
) -> ProjectDetailResponse:
    project = await service.get_by_id(project_id)
    return ProjectDetailResponse(data=ProjectResponse.from_entity(project))


@router.post(
    "",
    response_model=ProjectDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    responses={
        201: {"description": "Project created successfully"},
        400: {"description": "Image not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_project(
    request: Request,
    body: ProjectCreate,
    admin: CurrentAdmin,
    service: ProjectService = Depends(get_project_service),
) -> ProjectDetailResponse:
    """Create a project. Upload the image first and pass its storage id."""
    project = await service.create(
        image=body.image,
        card_title=body.card_title,
        card_description=body.card_description,
        tag=body.tag,
        github_link=body.github_link,
        website_link=body.website_link,
    )
    return ProjectDetailResponse(data=ProjectResponse.from_entity(project))


@router.patch(
    "/{project_id}",
    response_model=ProjectDetailResponse,
    summary="Update a project",
    responses={404: {"description": "Project not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_project(
    request: Request,
    project_id: UUID,
    body: ProjectUpdate,
    admin: CurrentAdmin,
    service: ProjectService = Depends(get_project_service),
) -> ProjectDetailResponse:
    """Update only the fields sent in the body."""
    project = await service.update(project_id, body.changes())
    return ProjectDetailResponse(data=ProjectResponse.from_entity(project))


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a project",
    responses={404: {"description": "Project not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_project(
    request: Request,
    project_id: UUID,
    admin: CurrentAdmin,
    service: ProjectService = Depends(get_project_service),
) -> None:
    await service.delete(project_id)
    return None
