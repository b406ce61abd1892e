"""
Read‑only views for the administrative panel.

The panel lists registrations next to human‑readable labels: the
name of the course a registration points at, the Spanish label of a
tour category and of the registration status.  Course references are
not enforced, so a registration whose course was deleted (or never
existed) is shown as ``Curso desconocido`` rather than failing.

``AdminService`` only reads from the storage repository.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List

from registration_portal_api.app.schemas.admin import (
    AdminSummary,
    CourseRegistrationView,
    RegistrationCounts,
    TourRegistrationView,
)
from registration_portal_api.app.schemas.registration import RegistrationStatus
from registration_portal_api.app.services.storage import IStorage


UNKNOWN_COURSE_LABEL = "Curso desconocido"

STATUS_LABELS: Dict[str, str] = {
    RegistrationStatus.PENDING.value: "Pendiente",
    RegistrationStatus.CONFIRMED.value: "Confirmado",
    RegistrationStatus.CANCELLED.value: "Cancelado",
}

TOUR_TYPE_LABELS: Dict[str, str] = {
    "weekday": "Lunes a Viernes",
    "saturday": "Sábado",
    "sunday": "Domingo",
}


def status_label(status: RegistrationStatus | str) -> str:
    """Spanish label for a status; unknown values are returned as is."""
    value = status.value if isinstance(status, RegistrationStatus) else status
    return STATUS_LABELS.get(value, value)


def tour_type_label(tour_type: str) -> str:
    return TOUR_TYPE_LABELS.get(tour_type, tour_type)


class AdminService:
    """Builds the admin panel views from a storage repository."""

    @classmethod
    def course_registrations(cls, storage: IStorage) -> List[CourseRegistrationView]:
        """Return every course registration with its course name.

        Course names are resolved against the current catalogue;
        dangling ``course_id`` values get ``UNKNOWN_COURSE_LABEL``.
        """
        course_names = {course.id: course.name for course in storage.get_all_courses()}
        return [
            CourseRegistrationView(
                **registration.model_dump(),
                course_name=course_names.get(registration.course_id, UNKNOWN_COURSE_LABEL),
                status_label=status_label(registration.status),
            )
            for registration in storage.get_all_course_registrations()
        ]

    @classmethod
    def tour_registrations(cls, storage: IStorage) -> List[TourRegistrationView]:
        return [
            TourRegistrationView(
                **registration.model_dump(),
                tour_type_label=tour_type_label(registration.tour_type),
                status_label=status_label(registration.status),
            )
            for registration in storage.get_all_tour_registrations()
        ]

    @classmethod
    def summary(cls, storage: IStorage) -> AdminSummary:
        """Count catalogue entries and registrations by status."""
        return AdminSummary(
            courses=len(storage.get_all_courses()),
            tours=len(storage.get_all_tours()),
            course_registrations=cls._count(r.status for r in storage.get_all_course_registrations()),
            tour_registrations=cls._count(r.status for r in storage.get_all_tour_registrations()),
        )

    @staticmethod
    def _count(statuses: Iterable[RegistrationStatus]) -> RegistrationCounts:
        counter = Counter(status.value for status in statuses)
        by_status = {status.value: counter.get(status.value, 0) for status in RegistrationStatus}
        return RegistrationCounts(total=sum(counter.values()), by_status=by_status)
