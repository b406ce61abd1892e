"""
Pydantic models for the administrative panel.

The admin views enrich registrations with display labels: the course
name (or ``Curso desconocido`` for dangling references), the tour
category label and the status label.  ``AdminSummary`` aggregates
registration counts by status.
"""

from typing import Dict

from pydantic import Field

from .base import CamelModel
from .registration import CourseRegistrationRead, TourRegistrationRead


class AdminLogin(CamelModel):
    password: str = Field(..., min_length=1)


class AdminToken(CamelModel):
    token: str
    token_type: str = "bearer"
    expires_in: int


class AdminSession(CamelModel):
    authenticated: bool


class CourseRegistrationView(CourseRegistrationRead):
    course_name: str
    status_label: str


class TourRegistrationView(TourRegistrationRead):
    tour_type_label: str
    status_label: str


class RegistrationCounts(CamelModel):
    total: int = 0
    by_status: Dict[str, int] = Field(default_factory=dict)


class AdminSummary(CamelModel):
    courses: int
    tours: int
    course_registrations: RegistrationCounts
    tour_registrations: RegistrationCounts
