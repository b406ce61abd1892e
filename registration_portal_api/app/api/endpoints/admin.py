"""
Admin panel endpoints.

``/login`` exchanges the shared admin password for a session token and
``/session`` validates one.  The remaining routes return the enriched
registration tables and status counts shown by the panel.  They are
guarded by ``require_admin``, which only rejects requests when
``ADMIN_AUTH_REQUIRED`` is enabled.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from registration_portal_api.app.api.deps import get_storage
from registration_portal_api.app.core.config import Settings
from registration_portal_api.app.core.security import get_admin_session, get_app_settings, login_admin, require_admin
from registration_portal_api.app.schemas.admin import (
    AdminLogin,
    AdminSession,
    AdminSummary,
    AdminToken,
    CourseRegistrationView,
    TourRegistrationView,
)
from registration_portal_api.app.services.admin_service import AdminService
from registration_portal_api.app.services.storage import IStorage


router = APIRouter()


@router.post("/login", response_model=AdminToken)
async def login(
    credentials: AdminLogin,
    config: Settings = Depends(get_app_settings),
) -> AdminToken:
    """Exchange the admin password for a bearer token.

    Returns HTTP 401 when the password is wrong.
    """
    token = login_admin(credentials.password, config)
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")
    return AdminToken(token=token, expires_in=config.access_token_expire_minutes * 60)


@router.get("/session", response_model=AdminSession)
async def session(admin: dict = Depends(get_admin_session)) -> AdminSession:
    return AdminSession(authenticated=True)


@router.get("/course-registrations", response_model=List[CourseRegistrationView])
async def course_registrations(
    storage: IStorage = Depends(get_storage),
    admin: dict = Depends(require_admin),
) -> List[CourseRegistrationView]:
    """Course registrations with their course name and status label."""
    return AdminService.course_registrations(storage)


@router.get("/tour-registrations", response_model=List[TourRegistrationView])
async def tour_registrations(
    storage: IStorage = Depends(get_storage),
    admin: dict = Depends(require_admin),
) -> List[TourRegistrationView]:
    return AdminService.tour_registrations(storage)


@router.get("/summary", response_model=AdminSummary)
async def summary(
    storage: IStorage = Depends(get_storage),
    admin: dict = Depends(require_admin),
) -> AdminSummary:
    """Catalogue sizes and registration counts by status."""
    return AdminService.summary(storage)
