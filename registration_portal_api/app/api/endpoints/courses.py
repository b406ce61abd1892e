"""
Course endpoints.

The catalogue is public; creating, editing and deleting courses is an
administrative action guarded by ``require_admin``.  Deleting a course
leaves its registrations in place.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from registration_portal_api.app.api.deps import get_storage
from registration_portal_api.app.core.security import require_admin
from registration_portal_api.app.schemas.course import CourseCreate, CourseRead, CourseUpdate
from registration_portal_api.app.services.storage import IStorage


router = APIRouter()


@router.get("", response_model=List[CourseRead])
async def list_courses(storage: IStorage = Depends(get_storage)) -> List[CourseRead]:
    """Return every course in the catalogue."""
    return storage.get_all_courses()


@router.get("/{course_id}", response_model=CourseRead)
async def get_course(course_id: int, storage: IStorage = Depends(get_storage)) -> CourseRead:
    course = storage.get_course(course_id)
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return course


@router.post("", response_model=CourseRead, status_code=status.HTTP_201_CREATED)
async def create_course(
    course: CourseCreate,
    storage: IStorage = Depends(get_storage),
    admin: dict = Depends(require_admin),
) -> CourseRead:
    """Add a course to the catalogue (admin only)."""
    return storage.create_course(course)


@router.patch("/{course_id}", response_model=CourseRead)
async def update_course(
    course_id: int,
    updates: CourseUpdate,
    storage: IStorage = Depends(get_storage),
    admin: dict = Depends(require_admin),
) -> CourseRead:
    """Update an existing course.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    update_dict = updates.model_dump(exclude_unset=True, exclude_none=True)
    course = storage.update_course(course_id, update_dict)
    if course is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return course


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(
    course_id: int,
    storage: IStorage = Depends(get_storage),
    admin: dict = Depends(require_admin),
) -> Response:
    """Delete a course (admin only).

    Registrations that reference the course are kept and show up as
    an unknown course in the admin views.
    """
    if not storage.delete_course(course_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
