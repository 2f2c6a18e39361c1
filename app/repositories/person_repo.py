from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from asyncpg import Connection, UniqueViolationError

# JSON field name -> column
UPDATABLE_COLUMNS = {
    "name": "name",
    "email": "email",
    "mobileNumber": "mobile_number",
    "dateOfBirth": "date_of_birth",
}


class PersonRepository:
    """Repository for the people table on top of asyncpg."""

    def __init__(self, conn: Connection):
        self.conn = conn

    # ------------------ Retrieval Methods ------------------ #

    async def list_all(self) -> List[dict]:
        sql = "SELECT * FROM people ORDER BY id;"
        records = await self.conn.fetch(sql)
        return [dict(record) for record in records]

    async def get_by_id(self, person_id: int) -> Optional[dict]:
        sql = "SELECT * FROM people WHERE id = $1;"
        record = await self.conn.fetchrow(sql, person_id)
        return dict(record) if record else None

    async def get_by_email(self, email: str) -> Optional[dict]:
        sql = "SELECT * FROM people WHERE email = $1;"
        record = await self.conn.fetchrow(sql, email)
        return dict(record) if record else None

    # ------------------ Creation ------------------ #

    async def create_if_email_absent(
        self,
        name: str,
        email: str,
        mobile_number: str,
        date_of_birth: date,
        created_at: Optional[datetime] = None,
    ) -> Optional[dict]:
        """Insert a person unless the email is taken; ``None`` when it is."""
        sql = """
            INSERT INTO people (name, email, mobile_number, date_of_birth, created_at, updated_at)
            SELECT $1::text, $2::text, $3::varchar, $4::date, $5::timestamptz, $5::timestamptz
            WHERE NOT EXISTS (SELECT 1 FROM people WHERE email = $2::text)
            RETURNING *;
        """
        created_at = created_at or datetime.now(timezone.utc)
        try:
            record = await self.conn.fetchrow(sql, name, email, mobile_number, date_of_birth, created_at)
        except UniqueViolationError:
            return None
        return dict(record) if record else None

    # ------------------ Update / Delete ------------------ #

    async def update(self, person_id: int, fields: Dict[str, Any]) -> Optional[dict]:
        """Apply ``fields`` (JSON names) to one row; ``updated_at`` is left alone."""
        assignments = []
        args: List[Any] = []
        for key, value in fields.items():
            column = UPDATABLE_COLUMNS.get(key)
            if column is None:
                continue
            args.append(value)
            assignments.append(f"{column} = ${len(args)}")

        if not assignments:
            return await self.get_by_id(person_id)

        args.append(person_id)
        sql = f"UPDATE people SET {', '.join(assignments)} WHERE id = ${len(args)} RETURNING *;"
        try:
            record = await self.conn.fetchrow(sql, *args)
        except UniqueViolationError:
            raise ValueError("Email already exists")
        return dict(record) if record else None

    async def delete(self, person_id: int) -> bool:
        sql = "DELETE FROM people WHERE id = $1 RETURNING id;"
        deleted_id = await self.conn.fetchval(sql, person_id)
        return deleted_id is not None

    async def count(self) -> int:
        total = await self.conn.fetchval("SELECT COUNT(*) FROM people;")
        return int(total or 0)
