"""
Storage repository for the registration portal.

``IStorage`` is the contract the route layer programs against and
``MemStorage`` its in‑memory implementation.  The repository is the
sole owner of entity state: five keyed collections (users, courses,
tours, course registrations, tour registrations), each with its own
identity counter.

Rules enforced here:

* identities start at 1, grow by one per create and are never reused,
  not even after a delete;
* registrations are always created with status ``pending`` and a
  ``registration_date`` stamped from the repository clock, formatted
  the way the panel displays it (``d/m/yyyy``);
* lookups, updates and deletes of absent records return ``None`` or
  ``False`` instead of raising, leaving the HTTP mapping to callers;
* status updates are pure label changes and the value is not
  re‑validated, the route layer having already parsed it;
* there are no cascading deletes and ``course_id`` is never checked.

Each collection is guarded by its own lock so identity assignment and
merges stay consistent when FastAPI runs handlers on worker threads.
Returned records are copies; mutating them does not affect the store.

The state lives only in memory and is lost when the process exits.
"""

from __future__ import annotations

import abc
import logging
import threading
from datetime import datetime
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar

from pydantic import BaseModel

from registration_portal_api.app.schemas.course import CourseCreate, CourseRead
from registration_portal_api.app.schemas.registration import (
    CourseRegistrationCreate,
    CourseRegistrationRead,
    RegistrationStatus,
    TourRegistrationCreate,
    TourRegistrationRead,
)
from registration_portal_api.app.schemas.tour import TourCreate, TourRead
from registration_portal_api.app.schemas.user import UserCreate, UserRead


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_registration_date(moment: datetime) -> str:
    """Render a date as the panel shows it, e.g. ``5/3/2024``."""
    return f"{moment.day}/{moment.month}/{moment.year}"


class _Collection(Generic[ModelT]):
    """A keyed collection with its own identity counter and lock."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self.lock = threading.RLock()
        self._items: Dict[int, ModelT] = {}
        self._next_id = 1

    def all(self) -> List[ModelT]:
        with self.lock:
            return [item.model_copy() for item in self._items.values()]

    def get(self, item_id: int) -> Optional[ModelT]:
        with self.lock:
            item = self._items.get(item_id)
            return item.model_copy() if item is not None else None

    def find(self, predicate: Callable[[ModelT], bool]) -> Optional[ModelT]:
        with self.lock:
            for item in self._items.values():
                if predicate(item):
                    return item.model_copy()
            return None

    def add(self, build: Callable[[int], ModelT]) -> ModelT:
        """Assign the next identity, build the record with it and store it."""
        with self.lock:
            item_id = self._next_id
            self._next_id += 1
            item = build(item_id)
            self._items[item_id] = item
        logger.info("Created %s %s", self.kind, item_id)
        return item.model_copy()

    def update(self, item_id: int, changes: Mapping[str, Any]) -> Optional[ModelT]:
        with self.lock:
            current = self._items.get(item_id)
            if current is None:
                return None
            allowed = {
                key: value
                for key, value in changes.items()
                if key in type(current).model_fields and key != "id"
            }
            updated = current.model_copy(update=allowed)
            self._items[item_id] = updated
        logger.info("Updated %s %s (%s)", self.kind, item_id, ", ".join(sorted(allowed)) or "no fields")
        return updated.model_copy()

    def remove(self, item_id: int) -> bool:
        with self.lock:
            removed = self._items.pop(item_id, None) is not None
        if removed:
            logger.info("Deleted %s %s", self.kind, item_id)
        return removed


class IStorage(abc.ABC):
    """Contract of the storage repository.

    Every "get" returns ``None`` for an unknown identity and every
    "delete" reports whether a record was removed.
    """

    # Users
    @abc.abstractmethod
    def get_user(self, user_id: int) -> Optional[UserRead]: ...

    @abc.abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserRead]: ...

    @abc.abstractmethod
    def create_user(self, user: UserCreate) -> UserRead: ...

    # Courses
    @abc.abstractmethod
    def get_all_courses(self) -> List[CourseRead]: ...

    @abc.abstractmethod
    def get_course(self, course_id: int) -> Optional[CourseRead]: ...

    @abc.abstractmethod
    def create_course(self, course: CourseCreate) -> CourseRead: ...

    @abc.abstractmethod
    def update_course(self, course_id: int, changes: Mapping[str, Any]) -> Optional[CourseRead]: ...

    @abc.abstractmethod
    def delete_course(self, course_id: int) -> bool: ...

    # Tours
    @abc.abstractmethod
    def get_all_tours(self) -> List[TourRead]: ...

    @abc.abstractmethod
    def get_tour(self, tour_id: int) -> Optional[TourRead]: ...

    @abc.abstractmethod
    def create_tour(self, tour: TourCreate) -> TourRead: ...

    # Course registrations
    @abc.abstractmethod
    def get_all_course_registrations(self) -> List[CourseRegistrationRead]: ...

    @abc.abstractmethod
    def get_course_registration(self, registration_id: int) -> Optional[CourseRegistrationRead]: ...

    @abc.abstractmethod
    def create_course_registration(self, registration: CourseRegistrationCreate) -> CourseRegistrationRead: ...

    @abc.abstractmethod
    def update_course_registration_status(
        self, registration_id: int, status: RegistrationStatus
    ) -> Optional[CourseRegistrationRead]: ...

    @abc.abstractmethod
    def delete_course_registration(self, registration_id: int) -> bool: ...

    # Tour registrations
    @abc.abstractmethod
    def get_all_tour_registrations(self) -> List[TourRegistrationRead]: ...

    @abc.abstractmethod
    def get_tour_registration(self, registration_id: int) -> Optional[TourRegistrationRead]: ...

    @abc.abstractmethod
    def create_tour_registration(self, registration: TourRegistrationCreate) -> TourRegistrationRead: ...

    @abc.abstractmethod
    def update_tour_registration_status(
        self, registration_id: int, status: RegistrationStatus
    ) -> Optional[TourRegistrationRead]: ...

    @abc.abstractmethod
    def delete_tour_registration(self, registration_id: int) -> bool: ...


class MemStorage(IStorage):
    """In‑memory implementation of :class:`IStorage`.

    Parameters
    ----------
    courses, tours : Iterable, optional
        Catalogue entries created, in order, when the repository is
        built.  The application passes the default seed lists; tests
        usually start empty.
    clock : Callable[[], datetime]
        Source of "now" for registration dates.
    """

    def __init__(
        self,
        courses: Iterable[CourseCreate] = (),
        tours: Iterable[TourCreate] = (),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._clock = clock
        self._users: _Collection[UserRead] = _Collection("user")
        self._courses: _Collection[CourseRead] = _Collection("course")
        self._tours: _Collection[TourRead] = _Collection("tour")
        self._course_registrations: _Collection[CourseRegistrationRead] = _Collection("course registration")
        self._tour_registrations: _Collection[TourRegistrationRead] = _Collection("tour registration")

        for course in courses:
            self.create_course(course)
        for tour in tours:
            self.create_tour(tour)

    def _registration_date(self) -> str:
        return format_registration_date(self._clock())

    # Users
    def get_user(self, user_id: int) -> Optional[UserRead]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[UserRead]:
        return self._users.find(lambda user: user.username == username)

    def create_user(self, user: UserCreate) -> UserRead:
        """Store a new user.

        Raises ``ValueError`` when the username is already taken.
        """
        with self._users.lock:
            if self.get_user_by_username(user.username) is not None:
                raise ValueError(f"Username {user.username!r} already exists")
            return self._users.add(lambda user_id: UserRead(id=user_id, **user.model_dump()))

    # Courses
    def get_all_courses(self) -> List[CourseRead]:
        return self._courses.all()

    def get_course(self, course_id: int) -> Optional[CourseRead]:
        return self._courses.get(course_id)

    def create_course(self, course: CourseCreate) -> CourseRead:
        return self._courses.add(lambda course_id: CourseRead(id=course_id, **course.model_dump()))

    def update_course(self, course_id: int, changes: Mapping[str, Any]) -> Optional[CourseRead]:
        """Shallow‑merge ``changes`` (snake_case field names) onto a course."""
        return self._courses.update(course_id, changes)

    def delete_course(self, course_id: int) -> bool:
        return self._courses.remove(course_id)

    # Tours
    def get_all_tours(self) -> List[TourRead]:
        return self._tours.all()

    def get_tour(self, tour_id: int) -> Optional[TourRead]:
        return self._tours.get(tour_id)

    def create_tour(self, tour: TourCreate) -> TourRead:
        return self._tours.add(lambda tour_id: TourRead(id=tour_id, **tour.model_dump()))

    # Course registrations
    def get_all_course_registrations(self) -> List[CourseRegistrationRead]:
        return self._course_registrations.all()

    def get_course_registration(self, registration_id: int) -> Optional[CourseRegistrationRead]:
        return self._course_registrations.get(registration_id)

    def create_course_registration(self, registration: CourseRegistrationCreate) -> CourseRegistrationRead:
        registration_date = self._registration_date()
        return self._course_registrations.add(
            lambda registration_id: CourseRegistrationRead(
                id=registration_id,
                status=RegistrationStatus.PENDING,
                registration_date=registration_date,
                **registration.model_dump(),
            )
        )

    def update_course_registration_status(
        self, registration_id: int, status: RegistrationStatus
    ) -> Optional[CourseRegistrationRead]:
        return self._course_registrations.update(registration_id, {"status": status})

    def delete_course_registration(self, registration_id: int) -> bool:
        return self._course_registrations.remove(registration_id)

    # Tour registrations
    def get_all_tour_registrations(self) -> List[TourRegistrationRead]:
        return self._tour_registrations.all()

    def get_tour_registration(self, registration_id: int) -> Optional[TourRegistrationRead]:
        return self._tour_registrations.get(registration_id)

    def create_tour_registration(self, registration: TourRegistrationCreate) -> TourRegistrationRead:
        registration_date = self._registration_date()
        return self._tour_registrations.add(
            lambda registration_id: TourRegistrationRead(
                id=registration_id,
                status=RegistrationStatus.PENDING,
                registration_date=registration_date,
                **registration.model_dump(),
            )
        )

    def update_tour_registration_status(
        self, registration_id: int, status: RegistrationStatus
    ) -> Optional[TourRegistrationRead]:
        return self._tour_registrations.update(registration_id, {"status": status})

    def delete_tour_registration(self, registration_id: int) -> bool:
        return self._tour_registrations.remove(registration_id)
