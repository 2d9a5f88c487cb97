"""Core utilities shared across localekit.

This package provides the fallible-result container used by the locale
layer and by consumers of the library, plus the optional Babel import
infrastructure:

    core <- bcp47 <- locale_utils

Exports:
    Status: Immutable status code plus message
    StatusCode: Canonical status codes
    StatusOr: Value-or-Status result container
    assign_or_return: Unwrap a StatusOr or return early
    returns_early: Decorator enabling assign_or_return

Python 3.13+.
"""

from .status import Status, StatusCode
from .statusor import StatusOr, assign_or_return, returns_early

__all__ = ["Status", "StatusCode", "StatusOr", "assign_or_return", "returns_early"]
