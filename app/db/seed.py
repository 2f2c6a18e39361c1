# app/db/seed.py
import asyncio
import random
from datetime import date, timedelta

from faker import Faker
from tqdm import tqdm

from app.core.config import settings
from app.db.session import Database
from app.repositories.person_repo import PersonRepository

fake = Faker()

NUM_PEOPLE = 200
OLDEST_BIRTH_DATE = date(1940, 1, 1)
YOUNGEST_BIRTH_DATE = date(2008, 12, 31)


def random_mobile_number() -> str:
    return "".join(str(random.randint(0, 9)) for _ in range(10))


def random_birth_date() -> date:
    span = (YOUNGEST_BIRTH_DATE - OLDEST_BIRTH_DATE).days
    return OLDEST_BIRTH_DATE + timedelta(days=random.randint(0, span))


async def seed(num_people: int = NUM_PEOPLE):
    database = Database(settings)
    await database.connect()

    try:
        async with database.acquire() as conn:
            repo = PersonRepository(conn)
            skipped = 0
            for _ in tqdm(range(num_people), desc="Creating people"):
                created = await repo.create_if_email_absent(
                    name=fake.name(),
                    email=fake.unique.email(),
                    mobile_number=random_mobile_number(),
                    date_of_birth=random_birth_date(),
                )
                if created is None:
                    skipped += 1

            total = await repo.count()
            print(f"Seed finished: {num_people - skipped} created, {skipped} skipped, {total} people in table.")
    finally:
        await database.close()


if __name__ == "__main__":
    asyncio.run(seed())
