"""Security audit events written to the structured log."""

import logging

import structlog
from fastapi import Request

from lifehacking.application.common.errors import AppError, ErrorKind
from lifehacking.application.common.security_events import (
    SecurityEventName,
    SecurityEventOutcome,
)

# Failures that should page someone rather than sit in the audit trail
HIGH_VALUE_FAILURES = frozenset({SecurityEventName.USER_DELETE_FAILED})

CORRELATION_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger("lifehacking.security")


class LoggingSecurityEventNotifier:
    """Emits one structured log entry per security event."""

    def notify(
        self,
        event: SecurityEventName,
        subject_id: str | None,
        outcome: SecurityEventOutcome,
        correlation_id: str | None = None,
        **properties: str | int | None,
    ) -> None:
        if outcome is SecurityEventOutcome.SUCCESS:
            level = logging.INFO
        elif event in HIGH_VALUE_FAILURES:
            level = logging.ERROR
        else:
            level = logging.WARNING

        logger.log(
            level,
            event.value,
            subject_id=subject_id,
            outcome=outcome.value,
            correlation_id=correlation_id,
            **properties,
        )


def request_properties(request: Request) -> dict[str, str | None]:
    """Correlation id and route path of the current request."""
    return {
        "correlation_id": request.headers.get(CORRELATION_ID_HEADER),
        "route_path": request.url.path,
    }


def error_properties(error: AppError) -> dict[str, str]:
    """Failure details that are safe to record."""
    properties = {"error_kind": error.kind.value}
    if error.kind is ErrorKind.INFRASTRUCTURE and error.cause is not None:
        properties["exception_type"] = type(error.cause).__name__
    return properties
