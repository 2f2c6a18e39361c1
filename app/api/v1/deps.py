from fastapi import Depends
from asyncpg import Connection

from app.db.session import get_db_connection
from app.repositories.person_repo import PersonRepository
from app.services.person_service import PersonService


def get_person_repo(conn: Connection = Depends(get_db_connection)) -> PersonRepository:
    return PersonRepository(conn)


def get_person_service(
        person_repo: PersonRepository = Depends(get_person_repo),
) -> PersonService:
    return PersonService(person_repo)
