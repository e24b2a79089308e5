"""Blob storage API routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from api.dependencies.auth import CurrentAdmin
from api.v1.dependencies import get_storage_service
from api.v1.schemas.storage import (
    BlobDeletedResponse,
    ResolvedUrlDetailResponse,
    ResolvedUrlResponse,
    UploadResultResponse,
    UploadTargetDetailResponse,
    UploadTargetResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.storage_service import StorageService

router = APIRouter(prefix="/storage", tags=["storage"])


def _content_length(request: Request) -> int | None:
    value = request.headers.get("content-length")
    if value is None or not value.isdigit():
        return None
    return int(value)


@router.post(
    "/upload-urls",
    response_model=UploadTargetDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Issue an upload URL",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_upload_url(
    request: Request,
    admin: CurrentAdmin,
    service: StorageService = Depends(get_storage_service),
) -> UploadTargetDetailResponse:
    """Mint a storage id and a short-lived, single-use URL to upload it to."""
    target = await service.issue_upload_target()
    return UploadTargetDetailResponse(
        data=UploadTargetResponse(
            storage_id=target.storage_id,
            upload_url=target.upload_url,
            expires_at=target.expires_at,
        )
    )


@router.post(
    "/uploads/{token}",
    response_model=UploadResultResponse,
    summary="Upload raw bytes to an issued URL",
    responses={
        200: {"description": "Upload stored"},
        400: {"description": "Invalid token, empty body or missing content type"},
        409: {"description": "Upload URL already used"},
        413: {"description": "Upload too large"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upload(
    request: Request,
    token: str,
    service: StorageService = Depends(get_storage_service),
) -> UploadResultResponse:
    """Store the request body under the storage id the URL was issued for.

    The signed token is the credential; no bearer token is needed.
    """
    blob = await service.complete_upload(
        token,
        content_type=request.headers.get("content-type"),
        data=request.stream(),
        declared_size=_content_length(request),
    )
    return UploadResultResponse(
        storageId=str(blob.id),
        storage_id=str(blob.id),
        content_type=blob.content_type,
        size=blob.size,
    )


@router.get(
    "/files/{token}",
    summary="Download a stored file",
    response_class=Response,
    responses={404: {"description": "Link invalid, expired or file deleted"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def download(
    request: Request,
    token: str,
    service: StorageService = Depends(get_storage_service),
) -> Response:
    """Serve the bytes behind a signed download URL."""
    blob = await service.open_download(token)
    return Response(
        content=blob.data,
        media_type=blob.content_type,
        headers={"Cache-Control": "private, max-age=300"},
    )


@router.get(
    "/{storage_id}/url",
    response_model=ResolvedUrlDetailResponse,
    summary="Resolve a storage id to a download URL",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def resolve_url(
    request: Request,
    storage_id: str,
    service: StorageService = Depends(get_storage_service),
) -> ResolvedUrlDetailResponse:
    """Return a fresh signed URL, or null when the reference is unknown."""
    url = await service.resolve(storage_id)
    return ResolvedUrlDetailResponse(
        data=ResolvedUrlResponse(storage_id=storage_id, url=url)
    )


@router.delete(
    "/{storage_id}",
    response_model=BlobDeletedResponse,
    summary="Delete a stored file",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_blob(
    request: Request,
    storage_id: str,
    admin: CurrentAdmin,
    service: StorageService = Depends(get_storage_service),
) -> BlobDeletedResponse:
    """Delete a blob. Reports whether it existed."""
    deleted = await service.delete(storage_id)
    return BlobDeletedResponse(storage_id=storage_id, deleted=deleted)
