# app/api/v1/routers.py
from fastapi import APIRouter
from app.api.v1.endpoints import people

router = APIRouter()

router.include_router(people.router)
