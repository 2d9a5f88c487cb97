"""localekit - BCP-47 locale tags, locale support matching and StatusOr results.

Parses locale tags into language/script/region subtags, checks requested
locales against supported locale patterns (including the ``*`` wildcard),
and provides a generic value-or-status container for reporting failures
without exceptions.

Public API:
    Locale - Parsed BCP-47 tag with support matching
    Status - Status code plus message
    StatusCode - Canonical status codes
    StatusOr - Value-or-Status result container
    assign_or_return - Unwrap a StatusOr or return early
    returns_early - Decorator enabling assign_or_return
    parse_locale - Cached Locale parsing
    parse_locale_or_status - Locale parsing reporting a StatusOr
    normalize_locale - Canonical BCP-47 form of a locale code

Exceptions:
    LocaleKitError - Base exception class
    BadStatusOrAccessError - Value read from a failed StatusOr
    InvalidLocaleError - Strict parsing failure

Submodules:
    localekit.bcp47 - Locale parsing and matching
    localekit.locale_utils - Normalization, system locale, Babel bridge
    localekit.core - Status, StatusOr and Babel compatibility helpers
    localekit.diagnostics - Exception hierarchy
"""

from .bcp47 import Locale
from .core import Status, StatusCode, StatusOr, assign_or_return, returns_early
from .diagnostics import BadStatusOrAccessError, InvalidLocaleError, LocaleKitError
from .locale_utils import normalize_locale, parse_locale, parse_locale_or_status

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localekit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BadStatusOrAccessError",
    "InvalidLocaleError",
    "Locale",
    "LocaleKitError",
    "Status",
    "StatusCode",
    "StatusOr",
    "__version__",
    "assign_or_return",
    "normalize_locale",
    "parse_locale",
    "parse_locale_or_status",
    "returns_early",
]
