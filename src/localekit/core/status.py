"""Status codes and the Status value type.

A Status is the failure half of a StatusOr: a canonical code plus an
optional human-readable message. Codes follow the canonical numbering
shared by gRPC and Abseil so they can cross process boundaries unchanged.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

__all__ = ["Status", "StatusCode"]


class StatusCode(IntEnum):
    """Canonical status codes.

    IntEnum keeps the numeric value available for serialization while
    ``name`` gives a stable, readable identifier for logs.
    """

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


@dataclass(frozen=True, slots=True)
class Status:
    """Immutable outcome of an operation.

    Attributes:
        code: Canonical status code (OK for success)
        message: Optional detail for logs and error reports

    Class Constants:
        Status.OK: The success status
        Status.UNKNOWN: Failure with no further information

    Example:
        >>> Status(StatusCode.NOT_FOUND, "no such locale").ok()
        False
        >>> str(Status(StatusCode.NOT_FOUND, "no such locale"))
        'NOT_FOUND: no such locale'
        >>> Status.OK.ok()
        True
    """

    OK: ClassVar["Status"]
    UNKNOWN: ClassVar["Status"]

    code: StatusCode = StatusCode.OK
    message: str = ""

    def ok(self) -> bool:
        """Return True if this status represents success."""
        return self.code == StatusCode.OK

    def canonical_code(self) -> StatusCode:
        """Return the canonical status code."""
        return self.code

    def __str__(self) -> str:
        if self.message:
            return f"{self.code.name}: {self.message}"
        return self.code.name


Status.OK = Status(StatusCode.OK)
Status.UNKNOWN = Status(StatusCode.UNKNOWN)
