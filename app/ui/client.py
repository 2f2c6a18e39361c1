from typing import Any, Dict, List, Optional

import httpx

from app.core.config import settings


class PeopleApiClient:
    """Thin async HTTP client for the /api/people endpoints."""

    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.http = httpx.AsyncClient(base_url=base_url, transport=transport)

    async def list_people(self) -> List[Dict[str, Any]]:
        response = await self.http.get("/api/people")
        response.raise_for_status()
        return response.json()

    async def create_person(self, data: Dict[str, Any]) -> Dict[str, Any]:
        response = await self.http.post("/api/people", json=data)
        response.raise_for_status()
        return response.json()

    async def update_person(self, person_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        response = await self.http.put(f"/api/people/{person_id}", json=data)
        response.raise_for_status()
        return response.json()

    async def delete_person(self, person_id: int) -> Dict[str, Any]:
        response = await self.http.delete(f"/api/people/{person_id}")
        response.raise_for_status()
        return response.json()

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "PeopleApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
