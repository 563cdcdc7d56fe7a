"""Result types for railway-oriented programming.

Handlers return a Result instead of raising for expected failures
(validation, missing records, illegal state transitions). Callers branch
with structural pattern matching.

Usage:
    def parse_amount(raw: str) -> Result[Decimal, str]:
        if not raw:
            return Failure(error="amount is required")
        return Success(value=Decimal(raw))

    match await handler.handle(command):
        case Success(value=attendance):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result = Union[Success[T], Failure[E]]
