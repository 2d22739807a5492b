"""Tagged results for boundary validation."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful validation carrying the parsed value."""

    value: T


@dataclass(frozen=True)
class Invalid:
    """Failed validation with a message per offending field."""

    errors: dict[str, str] = field(default_factory=dict)


Result = Ok[T] | Invalid
