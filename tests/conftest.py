"""Shared fixtures: the app wired to an in-memory repository, no database needed."""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.api.v1.deps import get_person_repo
from app.main import create_app
from app.repositories.person_repo import UPDATABLE_COLUMNS


class InMemoryPersonRepository:
    """Same interface as PersonRepository, rows kept in a dict."""

    def __init__(self):
        self.rows = {}
        self._next_id = 1

    async def list_all(self):
        return [dict(row) for _, row in sorted(self.rows.items())]

    async def get_by_id(self, person_id):
        row = self.rows.get(person_id)
        return dict(row) if row else None

    async def get_by_email(self, email):
        for row in self.rows.values():
            if row["email"] == email:
                return dict(row)
        return None

    async def create_if_email_absent(self, name, email, mobile_number, date_of_birth, created_at=None):
        if await self.get_by_email(email):
            return None
        created_at = created_at or datetime.now(timezone.utc)
        row = {
            "id": self._next_id,
            "name": name,
            "email": email,
            "mobile_number": mobile_number,
            "date_of_birth": date_of_birth,
            "created_at": created_at,
            "updated_at": created_at,
        }
        self.rows[row["id"]] = row
        self._next_id += 1
        return dict(row)

    async def update(self, person_id, fields):
        row = self.rows.get(person_id)
        if row is None:
            return None
        email = fields.get("email")
        if email is not None and any(
            other["email"] == email for pid, other in self.rows.items() if pid != person_id
        ):
            raise ValueError("Email already exists")
        for key, value in fields.items():
            if key in UPDATABLE_COLUMNS:
                row[UPDATABLE_COLUMNS[key]] = value
        return dict(row)

    async def delete(self, person_id):
        return self.rows.pop(person_id, None) is not None

    async def count(self):
        return len(self.rows)


class FailingPersonRepository:
    """Every call blows up the way a dropped connection would."""

    def __getattr__(self, name):
        async def fail(*args, **kwargs):
            raise ConnectionError("connection to server was lost")
        return fail


@pytest.fixture
def repo():
    return InMemoryPersonRepository()


@pytest.fixture
def failing_repo():
    return FailingPersonRepository()


@pytest.fixture
def app(repo):
    application = create_app()
    application.dependency_overrides[get_person_repo] = lambda: repo
    return application


@pytest.fixture
def client(app):
    # not entered as a context manager, so the lifespan never opens a pool
    return TestClient(app)


@pytest.fixture
def ann():
    return {
        "name": "Ann",
        "email": "ann@x.com",
        "mobileNumber": "1234567890",
        "dateOfBirth": "1990-01-01",
    }
