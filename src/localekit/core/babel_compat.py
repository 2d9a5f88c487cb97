"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so that every
Babel-dependent call site reports a missing installation the same way.

localekit supports two installation modes:
    - Core: `pip install localekit` (parser, matcher, StatusOr; no dependencies)
    - Babel bridge: `pip install localekit[babel]` (CLDR-backed Locale objects)

Usage Pattern:
    # At module top-level (for type hints only):
    from typing import TYPE_CHECKING
    if TYPE_CHECKING:
        from babel import Locale as BabelLocale

    # At function call site (for runtime use):
    from localekit.core.babel_compat import get_babel_locale_class

    def to_babel(tag: str) -> BabelLocale:
        return get_babel_locale_class().parse(tag)  # Raises BabelImportError if missing

    # Catching CLDR misses without importing Babel at module level:
    from localekit.core.babel_compat import get_unknown_locale_error

    try:
        to_babel(tag)
    except get_unknown_locale_error():
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale as BabelLocale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = [
    "BabelImportError",
    "get_babel_locale_class",
    "get_unknown_locale_error",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel extra.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install localekit[babel]"
        )
        super().__init__(message)
        self.feature = feature


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_babel_locale_class() -> type[BabelLocale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError
