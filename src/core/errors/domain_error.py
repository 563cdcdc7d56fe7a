"""Base error carried inside Result values.

Handlers never raise for business outcomes such as an unknown attendance,
a refused transition or a declined card. They return ``Failure(error=...)``
holding a DomainError (or a subclass), and the presentation layer maps the
error code onto an RFC 9457 response.

DomainError is a plain frozen dataclass, not an Exception subclass.
Subclasses add typed context fields (``field``, ``resource_type``,
``provider_name`` ...) on top of code, message and details.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error value returned inside ``Failure``.

    Attributes:
        code: Stable machine-readable code, surfaced as ``code`` in problem
            responses.
        message: Human-readable explanation, surfaced as ``detail``.
        details: Extra string context (ids, statuses) for the client.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
