"""Header and Introduction API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_header_service, get_introduction_service
from api.v1.schemas.header import (
    CurrentHeaderResponse,
    CurrentIntroductionResponse,
    HeaderCreate,
    HeaderDetailResponse,
    HeaderListResponse,
    HeaderUpdate,
    IntroductionCreate,
    IntroductionDetailResponse,
    IntroductionListResponse,
    IntroductionUpdate,
    header_response,
    introduction_response,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.header_service import HeaderService, IntroductionService

router = APIRouter(prefix="/headers", tags=["headers"])


@router.get("", response_model=HeaderListResponse, summary="List headers")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_headers(
    request: Request,
    service: HeaderService = Depends(get_header_service),
) -> HeaderListResponse:
    """Get all headers, most recent first."""
    headers = await service.get_all()
    return HeaderListResponse(data=[header_response(h) for h in headers])


@router.get("/current", response_model=CurrentHeaderResponse, summary="Get the current header")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_current_header(
    request: Request,
    service: HeaderService = Depends(get_header_service),
) -> CurrentHeaderResponse:
    """Get the most recent header; ``data`` is null when none exists."""
    header = await service.get_current()
    return CurrentHeaderResponse(data=header_response(header) if header else None)


@router.get(
    "/{header_id}",
    response_model=HeaderDetailResponse,
    summary="Get a header",
    responses={404: {"description": "Header not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_header(
    request: Request,
    header_id: UUID,
    service: HeaderService = Depends(get_header_service),
) -> HeaderDetailResponse:
    header = await service.get_by_id(header_id)
    return HeaderDetailResponse(data=header_response(header))


@router.post(
    "",
    response_model=HeaderDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a header",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_header(
    request: Request,
    body: HeaderCreate,
    admin: CurrentAdmin,
    service: HeaderService = Depends(get_header_service),
) -> HeaderDetailResponse:
    """Create a header. The newest header is the one shown on the site."""
    header = await service.create(name=body.name, description=body.description)
    return HeaderDetailResponse(data=header_response(header))


@router.patch(
    "/{header_id}",
    response_model=HeaderDetailResponse,
    summary="Update a header",
    responses={404: {"description": "Header not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_header(
    request: Request,
    header_id: UUID,
    body: HeaderUpdate,
    admin: CurrentAdmin,
    service: HeaderService = Depends(get_header_service),
) -> HeaderDetailResponse:
    """Update only the fields sent in the body."""
    header = await service.update(header_id, body.changes())
    return HeaderDetailResponse(data=header_response(header))


@router.delete(
    "/{header_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a header",
    responses={404: {"description": "Header not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_header(
    request: Request,
    header_id: UUID,
    admin: CurrentAdmin,
    service: HeaderService = Depends(get_header_service),
) -> None:
    await service.delete(header_id)
    return None


introductions_router = APIRouter(prefix="/introductions", tags=["introductions"])


@introductions_router.get("", response_model=IntroductionListResponse, summary="List introductions")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_introductions(
    request: Request,
    service: IntroductionService = Depends(get_introduction_service),
) -> IntroductionListResponse:
    """Get all introductions, most recent first."""
    introductions = await service.get_all()
    return IntroductionListResponse(data=[introduction_response(i) for i in introductions])


@introductions_router.get(
    "/current",
    response_model=CurrentIntroductionResponse,
    summary="Get the current introduction",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_current_introduction(
    request: Request,
    service: IntroductionService = Depends(get_introduction_service),
) -> CurrentIntroductionResponse:
    """Get the most recent introduction; ``data`` is null when none exists."""
    introduction = await service.get_current()
    return CurrentIntroductionResponse(
        data=introduction_response(introduction) if introduction else None
    )


@introductions_router.get(
    "/{introduction_id}",
    response_model=IntroductionDetailResponse,
    summary="Get an introduction",
    responses={404: {"description": "Introduction not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_introduction(
    request: Request,
    introduction_id: UUID,
    service: IntroductionService = Depends(get_introduction_service),
) -> IntroductionDetailResponse:
    introduction = await service.get_by_id(introduction_id)
    return IntroductionDetailResponse(data=introduction_response(introduction))


@introductions_router.post(
    "",
    response_model=IntroductionDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an introduction",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_introduction(
    request: Request,
    body: IntroductionCreate,
    admin: CurrentAdmin,
    service: IntroductionService = Depends(get_introduction_service),
) -> IntroductionDetailResponse:
    introduction = await service.create(
        title=body.title,
        header=body.header,
        description=body.description,
    )
    return IntroductionDetailResponse(data=introduction_response(introduction))


@introductions_router.patch(
    "/{introduction_id}",
    response_model=IntroductionDetailResponse,
    summary="Update an introduction",
    responses={404: {"description": "Introduction not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_introduction(
    request: Request,
    introduction_id: UUID,
    body: IntroductionUpdate,
    admin: CurrentAdmin,
    service: IntroductionService = Depends(get_introduction_service),
) -> IntroductionDetailResponse:
    """Update only the fields sent in the body."""
    introduction = await service.update(introduction_id, body.changes())
    return IntroductionDetailResponse(data=introduction_response(introduction))


@introductions_router.delete(
    "/{introduction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an introduction",
    responses={404: {"description": "Introduction not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_introduction(
    request: Request,
    introduction_id: UUID,
    admin: CurrentAdmin,
    service: IntroductionService = Depends(get_introduction_service),
) -> None:
    await service.delete(introduction_id)
    return None
