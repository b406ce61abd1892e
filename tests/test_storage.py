"""
Unit tests for the in-memory storage repository.
"""

import threading
from datetime import datetime

import pytest

from registration_portal_api.app.schemas.course import CourseCreate
from registration_portal_api.app.schemas.registration import (
    CourseRegistrationCreate,
    RegistrationStatus,
    TourRegistrationCreate,
)
from registration_portal_api.app.schemas.tour import TourCreate
from registration_portal_api.app.schemas.user import UserCreate
from registration_portal_api.app.services.storage import IStorage, MemStorage, format_registration_date


def make_course(name: str = "Cerámica", capacity: int = 10) -> CourseCreate:
    return CourseCreate(
        name=name,
        description="Taller de iniciación",
        date="10 Abr 2024",
        capacity=capacity,
        image_url="https://img.example.org/ceramica.png",
    )


def make_course_registration(course_id: int = 1, **overrides) -> CourseRegistrationCreate:
    data = {
        "course_id": course_id,
        "participant_name": "Marta Ruiz",
        "email": "marta@academia.es",
        "phone": "622222222",
        "level": "intermedio",
    }
    data.update(overrides)
    return CourseRegistrationCreate(**data)


def make_tour_registration(**overrides) -> TourRegistrationCreate:
    data = {
        "tour_type": "saturday",
        "preferred_date": "2024-03-23",
        "number_of_people": "5+",
        "responsible_name": "Pablo Díaz",
        "email": "pablo@colegio.es",
        "phone": "633333333",
    }
    data.update(overrides)
    return TourRegistrationCreate(**data)


class TestIdentities:
    def test_memstorage_implements_contract(self, storage):
        assert isinstance(storage, IStorage)

    def test_ids_start_at_one_per_kind(self, storage):
        assert storage.create_course(make_course()).id == 1
        assert storage.create_tour(TourCreate(type="sunday", schedule="11:00", description="x", capacity=5)).id == 1
        assert storage.create_course_registration(make_course_registration()).id == 1
        assert storage.create_tour_registration(make_tour_registration()).id == 1

    def test_ids_increase_and_are_never_reused(self, storage):
        first = storage.create_course(make_course("A"))
        second = storage.create_course(make_course("B"))
        assert storage.delete_course(second.id)
        third = storage.create_course(make_course("C"))
        assert storage.delete_course(first.id)
        fourth = storage.create_course(make_course("D"))

        ids = [first.id, second.id, third.id, fourth.id]
        assert ids == [1, 2, 3, 4]
        assert len(set(ids)) == len(ids)

    def test_registration_ids_survive_deletes(self, storage):
        ids = []
        for _ in range(3):
            registration = storage.create_course_registration(make_course_registration())
            ids.append(registration.id)
            storage.delete_course_registration(registration.id)
        assert ids == [1, 2, 3]

    def test_concurrent_creates_get_distinct_ids(self, storage):
        results = []
        results_lock = threading.Lock()

        def worker():
            for _ in range(50):
                registration = storage.create_course_registration(make_course_registration())
                with results_lock:
                    results.append(registration.id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == list(range(1, 401))
        assert len(storage.get_all_course_registrations()) == 400


class TestRegistrationDefaults:
    def test_new_registrations_are_pending(self, storage):
        course_registration = storage.create_course_registration(make_course_registration())
        tour_registration = storage.create_tour_registration(make_tour_registration())
        assert course_registration.status == RegistrationStatus.PENDING
        assert tour_registration.status == RegistrationStatus.PENDING

    def test_client_status_is_ignored(self, storage):
        payload = CourseRegistrationCreate.model_validate(
            {
                "courseId": 1,
                "participantName": "Marta Ruiz",
                "email": "marta@academia.es",
                "phone": "622222222",
                "level": "avanzado",
                "status": "confirmed",
                "registrationDate": "1/1/2000",
            }
        )
        registration = storage.create_course_registration(payload)
        assert registration.status == RegistrationStatus.PENDING
        assert registration.registration_date == "5/3/2024"

    def test_registration_date_uses_clock(self):
        storage = MemStorage(clock=lambda: datetime(2025, 12, 31, 23, 59))
        registration = storage.create_tour_registration(make_tour_registration())
        assert registration.registration_date == "31/12/2025"

    def test_format_registration_date_has_no_padding(self):
        assert format_registration_date(datetime(2024, 1, 7)) == "7/1/2024"

    def test_status_update_keeps_registration_date(self, storage):
        registration = storage.create_course_registration(make_course_registration())
        updated = storage.update_course_registration_status(registration.id, RegistrationStatus.CONFIRMED)
        assert updated.registration_date == registration.registration_date

    def test_dangling_course_id_is_accepted(self, storage):
        registration = storage.create_course_registration(make_course_registration(course_id=999))
        assert registration.course_id == 999
        assert storage.get_course(999) is None


class TestReadsAndDeletes:
    def test_get_all_empty(self, storage):
        assert storage.get_all_courses() == []
        assert storage.get_all_tours() == []
        assert storage.get_all_course_registrations() == []
        assert storage.get_all_tour_registrations() == []

    def test_get_all_keeps_insertion_order(self, storage):
        for name in ("A", "B", "C"):
            storage.create_course(make_course(name))
        assert [course.name for course in storage.get_all_courses()] == ["A", "B", "C"]

    def test_get_missing_returns_none(self, storage):
        assert storage.get_course(42) is None
        assert storage.get_tour(42) is None
        assert storage.get_course_registration(42) is None
        assert storage.get_tour_registration(42) is None
        assert storage.get_user(42) is None

    @pytest.mark.parametrize(
        "create, get, delete",
        [
            ("create_course_registration", "get_course_registration", "delete_course_registration"),
            ("create_tour_registration", "get_tour_registration", "delete_tour_registration"),
        ],
    )
    def test_read_after_delete(self, storage, create, get, delete):
        payload = make_course_registration() if create == "create_course_registration" else make_tour_registration()
        record = getattr(storage, create)(payload)

        assert getattr(storage, delete)(record.id) is True
        assert getattr(storage, get)(record.id) is None
        assert getattr(storage, delete)(record.id) is False

    def test_delete_course_does_not_cascade(self, storage):
        course = storage.create_course(make_course())
        registration = storage.create_course_registration(make_course_registration(course_id=course.id))

        assert storage.delete_course(course.id) is True
        assert storage.get_course_registration(registration.id) == registration

    def test_returned_records_are_copies(self, storage):
        course = storage.create_course(make_course("Original"))
        course.name = "Changed outside"
        assert storage.get_course(course.id).name == "Original"


class TestUpdates:
    def test_partial_update_changes_only_given_field(self, storage):
        course = storage.create_course(make_course("Yoga", capacity=12))
        updated = storage.update_course(course.id, {"capacity": 30})

        assert updated.capacity == 30
        assert updated.model_dump(exclude={"capacity"}) == course.model_dump(exclude={"capacity"})
        assert storage.get_course(course.id) == updated

    def test_update_cannot_change_identity(self, storage):
        course = storage.create_course(make_course())
        updated = storage.update_course(course.id, {"id": 99, "name": "Nuevo"})
        assert updated.id == course.id
        assert storage.get_course(99) is None

    def test_update_missing_course(self, storage):
        assert storage.update_course(7, {"name": "Nada"}) is None

    @pytest.mark.parametrize("start", list(RegistrationStatus))
    @pytest.mark.parametrize("target", list(RegistrationStatus))
    def test_any_status_transition_is_allowed(self, storage, start, target):
        registration = storage.create_tour_registration(make_tour_registration())
        storage.update_tour_registration_status(registration.id, start)

        updated = storage.update_tour_registration_status(registration.id, target)
        assert updated.status == target
        assert storage.get_tour_registration(registration.id).status == target

    def test_status_update_missing_registration(self, storage):
        assert storage.update_course_registration_status(5, RegistrationStatus.CONFIRMED) is None
        assert storage.update_tour_registration_status(5, RegistrationStatus.CANCELLED) is None


class TestUsers:
    def test_create_and_lookup_user(self, storage):
        user = storage.create_user(UserCreate(username="coordinacion", password="clave"))
        assert user.id == 1
        assert storage.get_user(1) == user
        assert storage.get_user_by_username("coordinacion") == user
        assert storage.get_user_by_username("nadie") is None

    def test_duplicate_username_rejected(self, storage):
        storage.create_user(UserCreate(username="coordinacion", password="clave"))
        with pytest.raises(ValueError, match="already exists"):
            storage.create_user(UserCreate(username="coordinacion", password="otra"))
        assert storage.create_user(UserCreate(username="secretaria", password="x")).id == 2


class TestSeeding:
    def test_seeded_catalogue(self, seeded_storage):
        courses = seeded_storage.get_all_courses()
        tours = seeded_storage.get_all_tours()
        assert [course.id for course in courses] == [1, 2, 3]
        assert [tour.type for tour in tours] == ["weekday", "saturday", "sunday"]
        assert seeded_storage.create_course(make_course()).id == 4
