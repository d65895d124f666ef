"""Shared fixtures for the PersonStore test suite.

Every test gets its own repository and application instance, so no
state leaks between tests.
"""

from __future__ import annotations

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from person_store_api.app.core.config import Settings
from person_store_api.app.core.repository import PersonRepository
from person_store_api.app.main import create_app
from person_store_api.app.services.person_service import PersonService


@pytest.fixture
def jane() -> Dict[str, Any]:
    """A valid person payload in wire form."""
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "dateOfBirth": "1990-01-01",
        "emailAddress": "jane@x.com",
        "socialSecurityNumber": "123456789",
    }


@pytest.fixture
def bob() -> Dict[str, Any]:
    return {
        "firstName": "Bob",
        "lastName": "Stone",
        "dateOfBirth": "1975-12-31",
        "emailAddress": "bob.stone@mail.com",
        "socialSecurityNumber": "987654321",
    }


@pytest.fixture
def repository() -> PersonRepository:
    return PersonRepository()


@pytest.fixture
def service(repository: PersonRepository) -> PersonService:
    return PersonService(repository)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(log_level="DEBUG", log_file=None, seed_sample_person=False)


@pytest.fixture
def app(test_settings: Settings, repository: PersonRepository):
    return create_app(test_settings, repository=repository)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
