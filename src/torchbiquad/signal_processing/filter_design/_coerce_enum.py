import enum
from typing import Type, TypeVar

from ._exceptions import InvalidParameterError

E = TypeVar("E", bound=enum.Enum)


def coerce_enum(enum_type: Type[E], value, description: str) -> E:
    """Member of ``enum_type`` for a member or its string value."""
    try:
        return enum_type(value)
    except ValueError:
        raise InvalidParameterError(
            f"Unknown {description}: {value!r}. Must be one of "
            f"{[member.value for member in enum_type]}"
        ) from None
