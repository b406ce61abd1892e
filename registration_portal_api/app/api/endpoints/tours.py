"""
Tour endpoints.

Tour slots are seeded at startup and read‑only through the API.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from registration_portal_api.app.api.deps import get_storage
from registration_portal_api.app.schemas.tour import TourRead
from registration_portal_api.app.services.storage import IStorage


router = APIRouter()


@router.get("", response_model=List[TourRead])
async def list_tours(storage: IStorage = Depends(get_storage)) -> List[TourRead]:
    return storage.get_all_tours()


@router.get("/{tour_id}", response_model=TourRead)
async def get_tour(tour_id: int, storage: IStorage = Depends(get_storage)) -> TourRead:
    tour = storage.get_tour(tour_id)
    if tour is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tour not found")
    return tour
