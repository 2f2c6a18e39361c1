# app/schemas/person_schema.py

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PersonBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonCreate(PersonBase):
    """Create body; shape checks live in app.core.validation, not here."""
    name: str
    email: str
    mobile_number: str
    date_of_birth: str


class PersonUpdate(PersonBase):
    name: Optional[str] = None
    email: Optional[str] = None
    mobile_number: Optional[str] = None
    date_of_birth: Optional[str] = None


class PersonOut(PersonBase):
    id: int
    name: str
    email: str
    mobile_number: str
    date_of_birth: date
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageOut(BaseModel):
    message: str
