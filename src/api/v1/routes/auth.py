"""Admin session API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentAdmin, get_auth_provider
from api.v1.schemas.auth import SessionCreate, SessionInfoResponse, SessionResponse
from core.rate_limit import LOGIN_LIMIT, READ_LIMIT, limiter
from infrastructure.auth.jwt_provider import JWTAuthProvider

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/session",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Exchange the admin passkey for a token",
    responses={
        201: {"description": "Session token issued"},
        401: {"description": "Invalid passkey"},
    },
)
@limiter.limit(LOGIN_LIMIT)  # type: ignore[untyped-decorator]
async def create_session(
    request: Request,
    body: SessionCreate,
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> SessionResponse:
    """Check the six-digit passkey on the server and issue a bearer token."""
    token, session = auth_provider.login(body.passkey)
    return SessionResponse(access_token=token, expires_at=session.expires_at)


@router.get(
    "/session",
    response_model=SessionInfoResponse,
    summary="Describe the current admin session",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_session(
    request: Request,
    admin: CurrentAdmin,
) -> SessionInfoResponse:
    """Verify the bearer token and return the session it carries."""
    return SessionInfoResponse(
        subject=admin.subject,
        role=admin.role,
        expires_at=admin.expires_at,
    )
