"""Person form: client-side state behind the add/modify/delete page."""
import logging
from typing import Any, Dict, List, Optional

import httpx

from app.core.validation import validate_person
from app.ui.client import PeopleApiClient

logger = logging.getLogger(__name__)

FORM_FIELDS = ("name", "email", "mobileNumber", "dateOfBirth")
DATA_ALREADY_EXISTS = "data already exists"


def empty_form() -> Dict[str, Any]:
    return {"id": None, "name": "", "email": "", "mobileNumber": "", "dateOfBirth": ""}


class PersonForm:
    """Holds the form fields, the loaded list and the error shown above the form.

    Network faults are logged and swallowed: the list stays as it was and the
    form keeps its contents. Only validation failures reach ``error``.
    """

    def __init__(self, api: PeopleApiClient):
        self.api = api
        self.people: List[Dict[str, Any]] = []
        self.form_data: Dict[str, Any] = empty_form()
        self.error = ""

    @property
    def submit_label(self) -> str:
        return "Modify Person" if self.form_data["id"] else "Add Person"

    def set_field(self, name: str, value: str) -> None:
        if name not in FORM_FIELDS:
            raise KeyError(name)
        self.form_data[name] = value

    def rows(self) -> List[str]:
        return [
            f"{p['name']} - {p['email']} - {p['mobileNumber']} - {p['dateOfBirth']}"
            for p in self.people
        ]

    async def load(self) -> None:
        try:
            self.people = await self.api.list_people()
        except httpx.HTTPError as e:
            logger.error(f"Error fetching people: {e}")

    def _find_existing(self) -> Optional[Dict[str, Any]]:
        # compares against the last loaded list, not the live store
        for person in self.people:
            if all(person.get(field) == self.form_data[field] for field in FORM_FIELDS):
                return person
        return None

    async def submit(self) -> bool:
        """Validate, then create or update. Returns True when the API accepted it."""
        reason = validate_person(self.form_data, check_calendar=True)
        if reason:
            self.error = reason
            return False
        self.error = ""

        if self._find_existing() is not None:
            self.error = DATA_ALREADY_EXISTS
            return False

        payload = {field: self.form_data[field] for field in FORM_FIELDS}
        try:
            if self.form_data["id"]:
                await self.api.update_person(self.form_data["id"], payload)
            else:
                await self.api.create_person(payload)
        except httpx.HTTPError as e:
            logger.error(f"Error adding/updating person: {e}")
            return False

        await self.load()
        self.form_data = empty_form()
        return True

    def modify(self, person_id: int) -> None:
        person = next((p for p in self.people if p["id"] == person_id), None)
        if person is None:
            raise KeyError(person_id)
        self.form_data = {"id": person["id"], **{field: person[field] for field in FORM_FIELDS}}

    async def delete(self, person_id: int) -> None:
        try:
            await self.api.delete_person(person_id)
        except httpx.HTTPError as e:
            logger.error(f"Error deleting person: {e}")
            return
        await self.load()
