"""Translation of application errors into HTTP responses."""

import logging

from fastapi import HTTPException
from starlette import status

from lifehacking.application.common.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)

GENERIC_ERROR_DETAIL = (
    "An unexpected error occurred while processing the request. Please try again later."
)

_STATUS_BY_KIND: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, "Validation error"),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource not found"),
    ErrorKind.CONFLICT: (status.HTTP_409_CONFLICT, "Conflict"),
    ErrorKind.INFRASTRUCTURE: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
}


class AppHTTPException(HTTPException):
    """HTTPException carrying the short title used in the error body."""

    def __init__(self, status_code: int, title: str, detail: str) -> None:
        super().__init__(status_code=status_code, detail=detail)
        self.title = title


def to_http_exception(error: AppError) -> AppHTTPException:
    """
    Map an application error to an HTTP exception.

    Infrastructure errors get a generic client-safe detail; their cause is
    logged here and never sent to the client.
    """
    status_code, title = _STATUS_BY_KIND[error.kind]
    if error.kind is ErrorKind.INFRASTRUCTURE:
        logger.error(f"Infrastructure error: {error.message}", exc_info=error.cause)
        return AppHTTPException(status_code, title, GENERIC_ERROR_DETAIL)
    return AppHTTPException(status_code, title, error.message)
