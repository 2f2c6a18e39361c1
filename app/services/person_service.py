# app/services/person_service.py

from typing import List

from app.core.validation import INVALID_DATE_OF_BIRTH, coerce_date_of_birth, validate_person
from app.repositories.person_repo import PersonRepository
from app.schemas.person_schema import PersonCreate, PersonUpdate


class InvalidPersonData(Exception): pass
class DuplicateEmail(Exception): pass
class PersonNotFound(Exception): pass


class PersonService:
    def __init__(self, person_repo: PersonRepository):
        self.person_repo = person_repo

    def _check(self, data: dict, partial: bool = False) -> None:
        # server runs the date rule as a pattern check only
        reason = validate_person(data, partial=partial)
        if reason:
            raise InvalidPersonData(reason)

    def _to_date(self, value: str):
        try:
            return coerce_date_of_birth(value)
        except (ValueError, OverflowError):
            raise InvalidPersonData(INVALID_DATE_OF_BIRTH)

    async def list_people(self) -> List[dict]:
        return await self.person_repo.list_all()

    async def create_person(self, person_in: PersonCreate) -> dict:
        self._check(person_in.model_dump(by_alias=True))

        existing = await self.person_repo.get_by_email(person_in.email)
        if existing:
            raise DuplicateEmail("person with same email already exists")

        created = await self.person_repo.create_if_email_absent(
            name=person_in.name,
            email=person_in.email,
            mobile_number=person_in.mobile_number,
            date_of_birth=self._to_date(person_in.date_of_birth),
        )
        if created is None:
            # lost a race against a concurrent create with the same email
            raise DuplicateEmail("person with same email already exists")
        return created

    async def update_person(self, person_id: int, person_in: PersonUpdate) -> dict:
        current = await self.person_repo.get_by_id(person_id)
        if current is None:
            raise PersonNotFound(f"Person with id {person_id} not found")

        fields = person_in.model_dump(by_alias=True, exclude_unset=True)
        self._check(fields, partial=True)

        if "email" in fields and fields["email"] != current["email"]:
            other = await self.person_repo.get_by_email(fields["email"])
            if other and other["id"] != person_id:
                raise DuplicateEmail("person with same email already exists")

        if "dateOfBirth" in fields:
            fields["dateOfBirth"] = self._to_date(fields["dateOfBirth"])

        try:
            updated = await self.person_repo.update(person_id, fields)
        except ValueError:
            raise DuplicateEmail("person with same email already exists")
        if updated is None:
            raise PersonNotFound(f"Person with id {person_id} not found")
        return updated

    async def delete_person(self, person_id: int) -> None:
        deleted = await self.person_repo.delete(person_id)
        if not deleted:
            raise PersonNotFound(f"Person with id {person_id} not found")
