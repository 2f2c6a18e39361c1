import logging
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1 import routers
from app.core.config import Settings, settings
from app.core.exceptions import http_exception_handler, request_validation_exception_handler
from app.db.session import Database

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}\n{traceback.format_exc()}")
    return JSONResponse(status_code=500, content={"error": "internal server error"})


def create_app(config: Settings = settings, database: Optional[Database] = None) -> FastAPI:
    database = database or Database(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.connect()
        yield
        await database.close()

    app = FastAPI(
        title="CMS API",
        description="Contact management: add, list, modify and delete people",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(routers.router)

    @app.get("/")
    async def root():
        return {"message": "Welcome to CMS API"}

    return app


app = create_app()
