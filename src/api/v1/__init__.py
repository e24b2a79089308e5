"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.auth import router as auth_router
from api.v1.routes.headers import introductions_router
from api.v1.routes.headers import router as headers_router
from api.v1.routes.project_details import router as project_details_router
from api.v1.routes.projects import router as projects_router
from api.v1.routes.services import router as services_router
from api.v1.routes.skills import router as skills_router
from api.v1.routes.storage import router as storage_router
from api.v1.routes.technologies import router as technologies_router
from api.v1.routes.work_experiences import router as work_experiences_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(storage_router)
router.include_router(headers_router)
router.include_router(introductions_router)
router.include_router(project_details_router)
router.include_router(skills_router)
router.include_router(projects_router)
router.include_router(services_router)
router.include_router(work_experiences_router)
router.include_router(technologies_router)
