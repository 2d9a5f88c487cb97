"""Error types for localekit.

Python 3.13+. Zero external dependencies.
"""

from .errors import BadStatusOrAccessError, EarlyReturn, InvalidLocaleError, LocaleKitError

__all__ = [
    "BadStatusOrAccessError",
    "EarlyReturn",
    "InvalidLocaleError",
    "LocaleKitError",
]
