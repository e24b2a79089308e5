"""Skill API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_skill_service
from api.v1.schemas.skill import (
    SkillCreate,
    SkillDetailResponse,
    SkillListResponse,
    SkillResponse,
    SkillUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=SkillListResponse, summary="List skills")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_skills(
    request: Request,
    service: SkillService = Depends(get_skill_service),
) -> SkillListResponse:
    """Get all skills, most recent first, with icons resolved."""
    skills = await service.get_all()
    return SkillListResponse(data=[SkillResponse.from_entity(s) for s in skills])


@router.get(
    "/{skill_id}",
    response_model=SkillDetailResponse,
    summary="Get a skill",
    responses={404: {"description": "Skill not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_skill(
    request: Request,
    skill_id: UUID,
    service: SkillService = Depends(get_skill_service),
) -> SkillDetailResponse:
    skill = await service.get_by_id(skill_id)
    return SkillDetailResponse(data=SkillResponse.from_entity(skill))


@router.post(
    "",
    response_model=SkillDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a skill",
    responses={
        201: {"description": "Skill created successfully"},
        400: {"description": "Icon file not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_skill(
    request: Request,
    body: SkillCreate,
    admin: CurrentAdmin,
    service: SkillService = Depends(get_skill_service),
) -> SkillDetailResponse:
    """Create a skill with an icon URL, an uploaded icon file, or both."""
    skill = await service.create(
        title=body.title,
        description=body.description,
        link=body.link,
        icon_url=body.icon_url,
        icon_file=body.icon_file,
    )
    return SkillDetailResponse(data=SkillResponse.from_entity(skill))


@router.patch(
    "/{skill_id}",
    response_model=SkillDetailResponse,
    summary="Update a skill",
    responses={
        400: {"description": "Update would leave the skill without an icon"},
        404: {"description": "Skill not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_skill(
    request: Request,
    skill_id: UUID,
    body: SkillUpdate,
    admin: CurrentAdmin,
    service: SkillService = Depends(get_skill_service),
) -> SkillDetailResponse:
    """Update only the fields sent in the body."""
    skill = await service.update(skill_id, body.changes())
    return SkillDetailResponse(data=SkillResponse.from_entity(skill))


@router.delete(
    "/{skill_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a skill",
    responses={404: {"description": "Skill not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_skill(
    request: Request,
    skill_id: UUID,
    admin: CurrentAdmin,
    service: SkillService = Depends(get_skill_service),
) -> None:
    await service.delete(skill_id)
    return None
