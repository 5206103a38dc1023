from typing import TYPE_CHECKING, Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

if TYPE_CHECKING:
    from pagewise.core.result import PaginationResult


class AppError(Exception):
    """Base application error with consistent schema."""

    def __init__(
        self,
        message: str,
        code: str = "ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found"):
        super().__init__(message, code="NOT_FOUND", status_code=status.HTTP_404_NOT_FOUND)


class BadRequestError(AppError):
    def __init__(self, message: str = "Bad request", details: dict[str, Any] | None = None):
        super().__init__(message, code="BAD_REQUEST", status_code=status.HTTP_400_BAD_REQUEST, details=details)


class PaginationError(AppError):
    """A data-source query failed while loading a page.

    ``result`` is the failed snapshot meant for the client; the storage error
    itself is only reachable through ``__cause__``.
    """

    def __init__(self, message: str, result: "PaginationResult", code: str = "PAGINATION_FAILED"):
        super().__init__(message, code=code, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.result = result


class CountError(PaginationError):
    def __init__(self, result: "PaginationResult", message: str = "count query failed"):
        super().__init__(message, result, code="COUNT_FAILED")


class FetchError(PaginationError):
    def __init__(self, result: "PaginationResult", message: str = "fetch query failed"):
        super().__init__(message, result, code="FETCH_FAILED")


class InvalidTransitionError(RuntimeError):
    """A pagination snapshot was advanced out of order or after it finished."""


def error_response(request: Request, exc: AppError) -> ORJSONResponse:
    body = {
        "error": {
            "message": exc.message,
            "code": exc.code,
            "details": exc.details,
        }
    }
    if hasattr(request.state, "request_id"):
        body["request_id"] = request.state.request_id
    return ORJSONResponse(status_code=exc.status_code, content=body)


async def app_exception_handler(request: Request, exc: AppError) -> ORJSONResponse:
    return error_response(request, exc)


async def pagination_exception_handler(request: Request, exc: PaginationError) -> ORJSONResponse:
    from pagewise.core.logging import get_logger
    from pagewise.core.response import page_response

    get_logger(__name__).error(
        "pagination_failed",
        code=exc.code,
        path=request.url.path,
        cause=repr(exc.__cause__),
    )
    return page_response(exc.result)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> ORJSONResponse:
    body = {
        "error": {
            "message": "Validation error",
            "code": "VALIDATION_ERROR",
            "details": {"errors": exc.errors()},
        }
    }
    if hasattr(request.state, "request_id"):
        body["request_id"] = request.state.request_id
    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=body,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    from pagewise.core.logging import get_logger
    get_logger(__name__).exception("unhandled_exception", exc_info=exc)
    body = {
        "error": {
            "message": "Internal server error",
            "code": "INTERNAL_ERROR",
            "details": {},
        }
    }
    if hasattr(request.state, "request_id"):
        body["request_id"] = request.state.request_id
    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body,
    )
