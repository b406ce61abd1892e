"""
Pydantic models for course and tour registrations.

Registrations are submitted by the public forms.  The insertable
schemas contain only what the visitor fills in; ``status`` and
``registrationDate`` are stamped by the storage repository and any
values sent by the client are dropped during validation.

``courseId`` is deliberately not checked against the course
catalogue.  A registration may outlive its course, and admin views
render such rows with an "unknown course" label.
"""

from enum import Enum
from typing import Optional

from pydantic import EmailStr, Field

from .base import CamelModel, RequiredStr


class RegistrationStatus(str, Enum):
    """Lifecycle label of a registration.

    Any status may be set from any other; the label carries no side
    effects.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class CourseRegistrationCreate(CamelModel):
    """Schema for submitting a course registration."""

    course_id: int = Field(..., examples=[1])
    participant_name: RequiredStr = Field(..., examples=["Ana Pérez"])
    email: EmailStr = Field(..., examples=["ana@example.com"])
    phone: RequiredStr = Field(..., examples=["+34 600 000 000"])
    # principiante, intermedio or avanzado in the public form
    level: RequiredStr = Field(..., examples=["principiante"])


class CourseRegistrationRead(CourseRegistrationCreate):
    id: int
    status: RegistrationStatus
    registration_date: str


class TourRegistrationCreate(CamelModel):
    """Schema for submitting a tour booking.

    ``numberOfPeople`` is free text because the form offers ``"5+"``
    alongside exact counts.  The identity card number, age,
    institution and gender come from the extended form and are
    optional.
    """

    tour_type: RequiredStr = Field(..., examples=["weekday"])
    preferred_date: RequiredStr = Field(..., examples=["2024-03-20"])
    number_of_people: RequiredStr = Field(..., examples=["3"])
    responsible_name: RequiredStr = Field(..., examples=["Luis Gómez"])
    email: EmailStr = Field(..., examples=["luis@example.com"])
    phone: RequiredStr = Field(..., examples=["+34 611 111 111"])
    cedula: Optional[RequiredStr] = None
    age: Optional[int] = Field(default=None, ge=5, le=100)
    institution: Optional[RequiredStr] = None
    gender: Optional[RequiredStr] = None


class TourRegistrationRead(TourRegistrationCreate):
    id: int
    status: RegistrationStatus
    registration_date: str


class StatusUpdate(CamelModel):
    """Body of ``PATCH .../{id}/status``.

    The value is kept as raw text here and parsed into
    ``RegistrationStatus`` by the route so an unknown label yields a
    plain ``Invalid status`` error.
    """

    status: Optional[str] = None
