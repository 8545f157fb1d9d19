"""
Domain layer exceptions.

These exceptions represent domain-level errors raised while building domain
objects: malformed identifiers, empty required fields and the like. Use cases
translate them into typed application errors; they never cross the HTTP
boundary as exceptions.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class so they can be caught and
    translated uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: a nil UUID passed as a tip id, an empty external auth id.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class DuplicateFavoriteError(DomainError):
    """
    Raised by the favorites store when a (user, tip) pair already exists.

    Only the single-insert path raises it; batch inserts treat the pair as
    already present.
    """

    def __init__(self, user_id: object, tip_id: object) -> None:
        super().__init__(
            f"Tip '{tip_id}' is already in user's favorites.",
            {"user_id": str(user_id), "tip_id": str(tip_id)},
        )
        self.user_id = user_id
        self.tip_id = tip_id
