# student_api/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from student_api.core.config import settings
from student_api.core.exceptions import BaseAPIException
from student_api.core.logging import logger


def _error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details
            }
        },
    )


# 1. Errors raised by our own code
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}: {exc.message}")
    return _error_response(exc.status_code, exc.code, exc.message, exc.details)


# 2. Body / path parameters that do not match the schemas
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # e.g. "body.email" -> "email", "path.student_id" -> "path.student_id"
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        details[field] = error["msg"]

    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Input validation failed",
        details,
    )


# 3. Standard HTTP errors (unknown route, method not allowed, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


# 4. Anything else, store failures included
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please contact support.",
        str(exc) if settings.DEBUG else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
