"""API routes."""

from fastapi import APIRouter

from jobboard.api import admin, auth, health, member, vacancies

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(vacancies.router, prefix="/vacancies", tags=["vacancies"])
router.include_router(member.router, prefix="/member", tags=["member"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
