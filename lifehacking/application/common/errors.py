"""
Application error values.

Use cases report failures as ``AppError`` values carried by ``Failure``.
There is no "forbidden" kind: ownership denials are reported as
``NOT_FOUND``, identical in shape to a genuinely missing resource.
"""

from dataclasses import dataclass, field
from enum import StrEnum


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INFRASTRUCTURE = "infrastructure"


@dataclass(frozen=True)
class AppError:
    """
    Typed failure returned from a use case.

    Attributes:
        kind: Error category used by the boundary for status mapping
        message: Client-safe description
        cause: Original exception for diagnostics, never shown to callers
    """

    kind: ErrorKind
    message: str
    cause: BaseException | None = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def validation(cls, message: str) -> "AppError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def not_found(cls, resource_type: str, resource_id: object) -> "AppError":
        return cls(ErrorKind.NOT_FOUND, f"{resource_type} with id '{resource_id}' was not found.")

    @classmethod
    def not_found_message(cls, message: str) -> "AppError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def conflict(cls, message: str) -> "AppError":
        return cls(ErrorKind.CONFLICT, message)

    @classmethod
    def infrastructure(cls, message: str, cause: BaseException | None = None) -> "AppError":
        return cls(ErrorKind.INFRASTRUCTURE, message, cause)
