"""Application-level exceptions and FastAPI exception handlers."""


import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class ResourceNotFoundError(AppException):
    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(
            f"The specified {resource} does not exist", status_code=404, code="NOT_FOUND"
        )

class InvalidCreateError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400, code="INVALID_CREATE")

class InvalidUpdateError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400, code="INVALID_UPDATE")

class MissingQueryParamError(AppException):
    def __init__(self, param: str):
        self.param = param
        super().__init__(
            f"Missing query param {param}", status_code=400, code="MISSING_QUERY_PARAM"
        )

class InvalidQueryParamValueError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400, code="INVALID_QUERY_PARAM_VALUE")

class DomainValidationError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=422, code="VALIDATION_ERROR")

class UnexpectedError(AppException):
    """Storage or infrastructure failure with no user-correctable cause.

    ``context`` and ``cause`` are for the logs only; callers always get the
    same opaque message.
    """

    def __init__(self, context: str, cause: BaseException | None = None):
        self.context = context
        self.cause = cause
        super().__init__("An unexpected error occurred", status_code=500, code="INTERNAL_ERROR")

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(message: str) -> dict:
    return {"error": message}

def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg", "")

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        if isinstance(exc, UnexpectedError):
            cause = exc.cause or exc
            logger.error(
                "%s %s failed [%s]: %s",
                request.method,
                request.url.path,
                exc.code,
                exc.context,
                exc_info=(type(cause), cause, cause.__traceback__),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body(_describe_validation_error(exc)),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("An unexpected error occurred"),
        )
