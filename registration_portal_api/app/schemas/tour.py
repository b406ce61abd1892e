"""
Pydantic models for guided‑tour slots.

Tours are seeded at startup and read‑only through the API.  ``type``
is a category tag such as ``weekday``, ``saturday`` or ``sunday``.
"""

from .base import Capacity, CamelModel, RequiredStr


class TourCreate(CamelModel):
    """Schema for creating a tour slot (seed data only)."""

    type: RequiredStr
    schedule: RequiredStr
    description: RequiredStr
    capacity: Capacity


class TourRead(TourCreate):
    id: int
