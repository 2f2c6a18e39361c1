from datetime import date

import pytest

from app.schemas.person_schema import PersonCreate, PersonUpdate
from app.services.person_service import (
    DuplicateEmail,
    InvalidPersonData,
    PersonNotFound,
    PersonService,
)


@pytest.fixture
def service(repo):
    return PersonService(repo)


@pytest.mark.asyncio
async def test_create_assigns_id_and_timestamps(service, ann):
    created = await service.create_person(PersonCreate(**ann))

    assert created["id"] == 1
    assert created["date_of_birth"] == date(1990, 1, 1)
    assert created["created_at"] == created["updated_at"]
    assert [p["id"] for p in await service.list_people()] == [1]


@pytest.mark.asyncio
async def test_create_rejects_invalid_data_before_touching_store(service, repo, ann):
    ann["email"] = "a@b"

    with pytest.raises(InvalidPersonData, match="invalid email address"):
        await service.create_person(PersonCreate(**ann))
    assert await repo.count() == 0


@pytest.mark.asyncio
async def test_create_rejects_duplicate_email(service, repo, ann):
    await service.create_person(PersonCreate(**ann))
    ann["name"] = "Someone Else"

    with pytest.raises(DuplicateEmail):
        await service.create_person(PersonCreate(**ann))
    assert await repo.count() == 1


@pytest.mark.asyncio
async def test_create_reports_duplicate_when_insert_loses_race(service, repo, ann, monkeypatch):
    async def nobody_there(email):
        return None

    await service.create_person(PersonCreate(**ann))
    monkeypatch.setattr(repo, "get_by_email", nobody_there)

    with pytest.raises(DuplicateEmail):
        await service.create_person(PersonCreate(**ann))
    assert await repo.count() == 1


@pytest.mark.asyncio
async def test_create_rejects_year_zero(service, ann):
    ann["dateOfBirth"] = "0000-01-01"

    with pytest.raises(InvalidPersonData, match="invalid date of birth format"):
        await service.create_person(PersonCreate(**ann))


@pytest.mark.asyncio
async def test_update_applies_partial_fields(service, ann):
    created = await service.create_person(PersonCreate(**ann))

    updated = await service.update_person(created["id"], PersonUpdate(name="Ann B"))

    assert updated["name"] == "Ann B"
    assert updated["email"] == ann["email"]
    assert updated["updated_at"] == created["updated_at"]


@pytest.mark.asyncio
async def test_update_validates_supplied_fields(service, ann):
    created = await service.create_person(PersonCreate(**ann))

    with pytest.raises(InvalidPersonData, match="mobile number must be 10 digits"):
        await service.update_person(created["id"], PersonUpdate(mobileNumber="123"))


@pytest.mark.asyncio
async def test_update_rejects_email_of_another_person(service, ann):
    first = await service.create_person(PersonCreate(**ann))
    await service.create_person(PersonCreate(**{**ann, "email": "bob@x.com"}))

    with pytest.raises(DuplicateEmail):
        await service.update_person(first["id"], PersonUpdate(email="bob@x.com"))


@pytest.mark.asyncio
async def test_update_keeping_own_email_is_allowed(service, ann):
    created = await service.create_person(PersonCreate(**ann))

    updated = await service.update_person(created["id"], PersonUpdate(email="ann@x.com", name="Ann C"))

    assert updated["name"] == "Ann C"


@pytest.mark.asyncio
async def test_update_unknown_id(service):
    with pytest.raises(PersonNotFound):
        await service.update_person(42, PersonUpdate(name="Nobody"))


@pytest.mark.asyncio
async def test_update_unknown_id_wins_over_invalid_body(service):
    with pytest.raises(PersonNotFound):
        await service.update_person(42, PersonUpdate(email="bad"))


@pytest.mark.asyncio
async def test_delete(service, repo, ann):
    created = await service.create_person(PersonCreate(**ann))

    await service.delete_person(created["id"])

    assert await repo.count() == 0
    with pytest.raises(PersonNotFound):
        await service.delete_person(created["id"])
