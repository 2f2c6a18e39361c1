from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class InvalidPersonDataException(HTTPException):
    def __init__(self, reason: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=reason,
        )

class PersonAlreadyExistsException(HTTPException):
    def __init__(self, field: str = "email"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"person with same {field} already exists",
        )

class PersonNotFoundException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="person not found",
        )

class InternalServerErrorException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="internal server error",
        )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    reason = "invalid request body"
    if errors:
        first = errors[0]
        field = first.get("loc", ("body",))[-1]
        reason = f"{field}: {first.get('msg', 'invalid value')}"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": reason})
