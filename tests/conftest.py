"""
Shared pytest fixtures.

Every test gets its own storage repository and application so state
never leaks between tests.  The repository clock is pinned to
5 March 2024 so registration dates are predictable.
"""

from dataclasses import replace
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from registration_portal_api.app.core.config import settings
from registration_portal_api.app.main import create_app
from registration_portal_api.app.services.seed import DEFAULT_COURSES, DEFAULT_TOURS
from registration_portal_api.app.services.storage import MemStorage


FIXED_NOW = datetime(2024, 3, 5, 10, 30)


@pytest.fixture
def storage() -> MemStorage:
    """Empty repository with a fixed clock."""
    return MemStorage(clock=lambda: FIXED_NOW)


@pytest.fixture
def seeded_storage() -> MemStorage:
    """Repository holding the default catalogue."""
    return MemStorage(courses=DEFAULT_COURSES, tours=DEFAULT_TOURS, clock=lambda: FIXED_NOW)


@pytest.fixture
def client(seeded_storage: MemStorage):
    app = create_app(storage=seeded_storage)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def gated_settings():
    """Settings with the admin gate switched on."""
    return replace(settings, admin_auth_required=True, admin_password="s3cret", secret_key="test-signing-key")


@pytest.fixture
def gated_client(seeded_storage: MemStorage, gated_settings):
    app = create_app(storage=seeded_storage, config=gated_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def course_payload() -> dict:
    return {
        "name": "X",
        "description": "Y",
        "date": "2025-01-01",
        "capacity": 10,
        "imageUrl": "https://x/y.png",
    }


@pytest.fixture
def course_registration_payload() -> dict:
    return {
        "courseId": 1,
        "participantName": "Ana Pérez",
        "email": "ana.perez@academia.es",
        "phone": "600000000",
        "level": "principiante",
    }


@pytest.fixture
def tour_registration_payload() -> dict:
    return {
        "tourType": "weekday",
        "preferredDate": "2024-03-20",
        "numberOfPeople": "3",
        "responsibleName": "Luis Gómez",
        "email": "luis.gomez@colegio.es",
        "phone": "611111111",
    }
