"""StatusOr: a value or the Status explaining why there is none.

StatusOr lets fallible operations report failure without raising. A
container holds exactly one of:

- a value (``ok()`` is True), or
- a non-OK Status (``ok()`` is False).

Reading the value of a failed container is a programmer error and raises
BadStatusOrAccessError; callers check ``ok()`` first or use ``value_or()``.

Early return:
    ``assign_or_return()`` unwraps a container inside a function decorated
    with ``@returns_early``. On failure the decorated function returns
    immediately with the supplied default (or the failure Status):

    >>> @returns_early
    ... def first_language(tag: str) -> str | Status:
    ...     locale = assign_or_return(parse_locale_or_status(tag))
    ...     return locale.language

Python 3.13+. Zero external dependencies.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

from localekit.diagnostics.errors import BadStatusOrAccessError, EarlyReturn

from .status import Status, StatusCode

__all__ = ["StatusOr", "assign_or_return", "returns_early"]

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

# Distinguishes "no argument" from an explicit None value or default.
_MISSING: Any = object()


class StatusOr[T]:
    """Either a value of type T or a non-OK Status.

    Construction:
        StatusOr(value)   -> success holding ``value``
        StatusOr(status)  -> failure holding a non-OK ``status``
        StatusOr()        -> failure holding Status.UNKNOWN

    Passing Status.OK is a misuse (there is no value to hold); it is logged
    and stored as an INTERNAL failure.

    The held value is stored and returned as-is: no copies are made, so
    objects that cannot be copied or default-constructed are supported.

    Example:
        >>> StatusOr(42).value_or_die()
        42
        >>> failed = StatusOr(Status(StatusCode.NOT_FOUND, "missing"))
        >>> failed.ok()
        False
        >>> failed.map(str).status().code
        <StatusCode.NOT_FOUND: 5>
    """

    __slots__ = ("_status", "_value")

    def __init__(self, value_or_status: T | Status = _MISSING) -> None:
        self._value: T | None
        self._status: Status
        if value_or_status is _MISSING:
            self._status = Status.UNKNOWN
            self._value = None
        elif isinstance(value_or_status, Status):
            if value_or_status.ok():
                logger.error("Status.OK is not a valid argument to StatusOr")
                self._status = Status(
                    StatusCode.INTERNAL, "StatusOr constructed from an OK status"
                )
            else:
                self._status = value_or_status
            self._value = None
        else:
            self._status = Status.OK
            self._value = value_or_status

    @classmethod
    def converted_from[S](
        cls, other: "StatusOr[S]", convert: Callable[[S], T]
    ) -> "StatusOr[T]":
        """Build a StatusOr[T] from a StatusOr[S] via ``convert``.

        Equivalent to ``other.map(convert)``; reads better where the target
        type is the focus of the call site.
        """
        return other.map(convert)

    def ok(self) -> bool:
        """Return True if this container holds a value."""
        return self._status.ok()

    def status(self) -> Status:
        """Return the failure Status, or Status.OK for a successful container."""
        return self._status

    def value_or_die(self) -> T:
        """Return the held value.

        Raises:
            BadStatusOrAccessError: If the container holds a failure. This is
                a contract violation; check ``ok()`` first.
        """
        if not self._status.ok():
            raise BadStatusOrAccessError(self._status)
        return self._value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Return the held value, or ``default`` for a failed container."""
        if not self._status.ok():
            return default
        return self._value  # type: ignore[return-value]

    def map[U](self, convert: Callable[[T], U]) -> "StatusOr[U]":
        """Convert the held value, preserving failure.

        A failed container yields a failed StatusOr[U] carrying the same
        Status; ``convert`` is not called.

        Args:
            convert: Conversion applied to the held value (a type or callable)

        Returns:
            StatusOr holding ``convert(value)`` or the original failure
        """
        if not self._status.ok():
            return StatusOr(self._status)
        return StatusOr(convert(self._value))  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusOr):
            return NotImplemented
        if self.ok() and other.ok():
            return bool(self._value == other._value)
        return self._status == other._status

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        return self.ok()

    def __repr__(self) -> str:
        if self.ok():
            return f"StatusOr({self._value!r})"
        return f"StatusOr({self._status!r})"


def assign_or_return[T](statusor: StatusOr[T], default: object = _MISSING) -> T:
    """Unwrap ``statusor`` or make the enclosing @returns_early function return.

    Args:
        statusor: Container to unwrap
        default: Value the enclosing function returns on failure. When
            omitted, the failure Status itself is returned.

    Returns:
        The held value of a successful container

    Raises:
        EarlyReturn: On failure; converted into a return value by the nearest
            enclosing ``@returns_early`` function.
    """
    if statusor.ok():
        return statusor.value_or_die()
    raise EarlyReturn(statusor.status() if default is _MISSING else default)


def returns_early(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator enabling assign_or_return() inside ``func``.

    An EarlyReturn raised while ``func`` runs (directly, or from an
    undecorated helper it calls) becomes ``func``'s return value.

    Example:
        >>> @returns_early
        ... def region_of(tag: str) -> str:
        ...     locale = assign_or_return(parse_locale_or_status(tag), "")
        ...     return locale.region
        >>> region_of("en-CH")
        'CH'
        >>> region_of("???")
        ''
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except EarlyReturn as signal:
            return signal.value  # type: ignore[return-value]

    return wrapper
