"""
Base class for Value Objects.

Value Objects are immutable objects that are defined by their attributes
rather than by identity. Two value objects are equal if all their
attributes are equal.

Example:
    @dataclass(frozen=True)
    class ExternalAuthId(ValueObject):
        value: str

        def __post_init__(self) -> None:
            if not self.value.strip():
                raise ValidationError("External auth id cannot be empty")
"""


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Subclasses are decorated with @dataclass(frozen=True) and validate
    themselves in __post_init__.
    """

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{self.__class__.__name__}({attrs})"

    def to_primitive(self) -> object:
        """
        Convert to a primitive Python type for serialization.

        Single-value objects return their only attribute, others a dict.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
