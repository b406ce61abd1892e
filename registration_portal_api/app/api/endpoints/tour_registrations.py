"""
Tour registration endpoints.

Visitors book guided tours through ``POST``; every new
registration starts as ``pending`` whatever the body says.  Listing,
status changes and deletion belong to the admin panel.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from registration_portal_api.app.api.deps import get_storage, parse_status
from registration_portal_api.app.core.security import require_admin
from registration_portal_api.app.schemas.registration import (
    TourRegistrationCreate,
    TourRegistrationRead,
    StatusUpdate,
)
from registration_portal_api.app.services.storage import IStorage


router = APIRouter()


@router.get("", response_model=List[TourRegistrationRead])
async def list_tour_registrations(
    storage: IStorage = Depends(get_storage),
    admin: dict = Depends(require_admin),
) -> List[TourRegistrationRead]:
    return storage.get_all_tour_registrations()


@router.get("/{registration_id}", response_model=TourRegistrationRead)
async def get_tour_registration(
    registration_id: int,
    storage: IStorage = Depends(get_storage),
    admin: dict = Depends(require_admin),
) -> TourRegistrationRead:
    registration = storage.get_tour_registration(registration_id)
    if registration is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Registration not found")
    return registration


@router.post("", response_model=TourRegistrationRead, status_code=status.HTTP_201_CREATED)
async def create_tour_registration(
    registration: TourRegistrationCreate,
    storage: IStorage = Depends(get_storage),
) -> TourRegistrationRead:
    """Book a guided tour for a group."""
    return storage.create_tour_registration(registration)


@router.patch("/{registration_id}/status", response_model=TourRegistrationRead)
async def update_tour_registration_status(
    registration_id: int,
    payload: Optional[StatusUpdate] = None,
    storage: IStorage = Depends(get_storage),
    admin: dict = Depends(require_admin),
) -> TourRegistrationRead:
    """Set the status of a registration to pending, confirmed or cancelled."""
    new_status = parse_status(payload)
    registration = storage.update_tour_registration_status(registration_id, new_status)
    if registration is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Registration not found")
    return registration


@router.delete("/{registration_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tour_registration(
    registration_id: int,
    storage: IStorage = Depends(get_storage),
    admin: dict = Depends(require_admin),
) -> Response:
    if not storage.delete_tour_registration(registration_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Registration not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
