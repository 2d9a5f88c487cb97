"""localekit exception hierarchy.

Parsing never raises: malformed tags become invalid Locale values and
fallible operations return StatusOr containers. The exceptions below cover
the remaining cases:

- Programmer errors (reading the value of a failed StatusOr)
- Strict parsing, for callers who opt into exceptions
- The control-flow signal used by assign_or_return()

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from localekit.core.status import Status

__all__ = [
    "BadStatusOrAccessError",
    "EarlyReturn",
    "InvalidLocaleError",
    "LocaleKitError",
]


class LocaleKitError(Exception):
    """Base exception for all localekit errors."""


class BadStatusOrAccessError(LocaleKitError):
    """Value of a failed StatusOr was read.

    This is a contract violation, not a recoverable condition: callers must
    check ``ok()`` before calling ``value_or_die()``. Do not catch it to
    recover a default; use ``value_or()`` for that.

    Attributes:
        status: Failure status held by the container
    """

    def __init__(self, status: Status) -> None:
        """Initialize BadStatusOrAccessError.

        Args:
            status: Failure status held by the container that was accessed
        """
        super().__init__(f"Attempting to fetch value of non-OK StatusOr: {status}")
        self.status = status


class InvalidLocaleError(LocaleKitError, ValueError):
    """Locale tag could not be parsed.

    Only raised by strict entry points such as ``Locale.from_bcp47_or_raise``.
    The default parser returns ``Locale.invalid()`` instead.

    Attributes:
        tag: The tag that failed to parse
    """

    def __init__(self, tag: str) -> None:
        """Initialize InvalidLocaleError.

        Args:
            tag: The tag that failed to parse
        """
        super().__init__(f"Invalid BCP-47 locale tag: {tag!r}")
        self.tag = tag


class EarlyReturn(Exception):  # noqa: N818 - control-flow signal, not an error
    """Signal raised by assign_or_return() on a failed StatusOr.

    Caught by the ``@returns_early`` decorator, which returns ``value`` from
    the decorated function. Escaping an undecorated call stack means
    assign_or_return() was used outside a ``@returns_early`` function.

    Attributes:
        value: Return value for the enclosing function
    """

    def __init__(self, value: object) -> None:
        super().__init__("assign_or_return() used outside a @returns_early function")
        self.value = value
