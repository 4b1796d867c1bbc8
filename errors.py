import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StringAnalyzerError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidPredicateError(ValidationError):
    """A filter parameter that could not be parsed as its declared type."""

    def __init__(self, predicate: str, message: str):
        super().__init__(message)
        self.predicate = predicate


class ValueTypeError(StringAnalyzerError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class ConflictError(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND


class InterpretationError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST


class SemanticConflictError(StringAnalyzerError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


async def string_analyzer_error_handler(request: Request, exc: StringAnalyzerError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request body or query parameters"},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StringAnalyzerError, string_analyzer_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
