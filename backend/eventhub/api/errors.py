"""
Translation of domain errors into HTTP responses.

Handlers never expose internal details; the body carries the error code and
its user-safe message.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from eventhub.core.errors import DomainError, ErrorCode, MissingFieldError

STATUS_BY_CODE = {
    ErrorCode.MISSING_FIELD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TIME: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DANGLING_REFERENCE: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_SLUG: status.HTTP_409_CONFLICT,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    body = {"code": exc.code.value, "message": exc.message}
    if isinstance(exc, MissingFieldError):
        body["field"] = exc.field
    return JSONResponse(
        status_code=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        content=body,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
