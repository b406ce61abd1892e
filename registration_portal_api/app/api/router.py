"""
Top‑level API router.

Aggregates the domain routers under a common prefix; ``main`` mounts
it at ``/api``.  When new areas are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import admin, course_registrations, courses, tour_registrations, tours


router = APIRouter()

router.include_router(courses.router, prefix="/courses", tags=["courses"])
router.include_router(tours.router, prefix="/tours", tags=["tours"])
router.include_router(
    course_registrations.router,
    prefix="/course-registrations",
    tags=["course-registrations"],
)
router.include_router(
    tour_registrations.router,
    prefix="/tour-registrations",
    tags=["tour-registrations"],
)
router.include_router(admin.router, prefix="/admin", tags=["admin"])
