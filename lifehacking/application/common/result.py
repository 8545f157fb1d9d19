"""
Result type for use case outcomes.

Use cases return ``Success(value)`` or ``Failure(AppError)`` instead of raising,
so callers branch on the outcome explicitly.

Example:
    result = await use_case.merge(user_id, tip_ids)
    if result.is_failure:
        error = result.unwrap_error()
        ...
    summary = result.unwrap()
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_error(self) -> None:
        """Raises ValueError - Success has no error."""
        raise ValueError("Cannot get error from Success result")


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raises ValueError - Failure has no value."""
        raise ValueError(f"Cannot get value from Failure result: {self.error}")

    def unwrap_error(self) -> E:
        """Get the error."""
        return self.error


# Type alias for Result - a union of Success and Failure
Result = Success[T] | Failure[E]
