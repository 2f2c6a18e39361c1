import logging
import traceback
from typing import List

from fastapi import APIRouter, Depends, status

from app.api.v1.deps import get_person_service
from app.core.exceptions import (
    InternalServerErrorException,
    InvalidPersonDataException,
    PersonAlreadyExistsException,
    PersonNotFoundException,
)
from app.schemas.person_schema import MessageOut, PersonCreate, PersonOut, PersonUpdate
from app.services.person_service import (
    DuplicateEmail,
    InvalidPersonData,
    PersonNotFound,
    PersonService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/people", tags=["people"])


@router.get("", response_model=List[PersonOut])
async def list_people(person_service: PersonService = Depends(get_person_service)):
    try:
        people = await person_service.list_people()
    except Exception as e:
        logger.error(f"Error fetching people: {e}\n{traceback.format_exc()}")
        raise InternalServerErrorException()
    return [PersonOut(**person) for person in people]


@router.post("", response_model=PersonOut, status_code=status.HTTP_201_CREATED)
async def create_person(
        body: PersonCreate,
        person_service: PersonService = Depends(get_person_service),
):
    try:
        created = await person_service.create_person(body)
    except InvalidPersonData as e:
        raise InvalidPersonDataException(str(e))
    except DuplicateEmail:
        raise PersonAlreadyExistsException("email")
    except Exception as e:
        logger.error(f"Error creating person: {e}\n{traceback.format_exc()}")
        raise InternalServerErrorException()
    return PersonOut(**created)


@router.put("/{person_id}", response_model=PersonOut)
async def update_person(
        person_id: int,
        body: PersonUpdate,
        person_service: PersonService = Depends(get_person_service),
):
    try:
        updated = await person_service.update_person(person_id, body)
    except InvalidPersonData as e:
        raise InvalidPersonDataException(str(e))
    except DuplicateEmail:
        raise PersonAlreadyExistsException("email")
    except PersonNotFound:
        raise PersonNotFoundException()
    except Exception as e:
        logger.error(f"Error updating person {person_id}: {e}\n{traceback.format_exc()}")
        raise InternalServerErrorException()
    return PersonOut(**updated)


@router.delete("/{person_id}", response_model=MessageOut)
async def delete_person(
        person_id: int,
        person_service: PersonService = Depends(get_person_service),
):
    try:
        await person_service.delete_person(person_id)
    except PersonNotFound:
        raise PersonNotFoundException()
    except Exception as e:
        logger.error(f"Error deleting person {person_id}: {e}\n{traceback.format_exc()}")
        raise InternalServerErrorException()
    return MessageOut(message="Person deleted successfully")
