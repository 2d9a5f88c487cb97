"""Locale utilities built on the BCP-47 parser.

Centralizes locale normalization used at system boundaries: canonical tag
strings for cache keys and lookups, cached parsing, status-returning parsing
for StatusOr-based call chains, system locale detection, and the optional
bridge to Babel Locale objects.

Python 3.13+. Babel is an optional dependency (only for get_babel_locale).
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Iterable
from typing import TYPE_CHECKING

from localekit.bcp47 import Locale
from localekit.constants import (
    DEFAULT_LOCALE,
    MAX_LOCALE_CACHE_SIZE,
    PSEUDO_LOCALES,
    WILDCARD,
)
from localekit.core.babel_compat import (
    get_babel_locale_class,
    get_unknown_locale_error,
    require_babel,
)
from localekit.core.status import Status, StatusCode
from localekit.core.statusor import StatusOr
from localekit.diagnostics.errors import InvalidLocaleError

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "parse_locale",
    "parse_locale_or_status",
    "parse_locales",
]

logger = logging.getLogger(__name__)

# Environment variables consulted by get_system_locale(), highest precedence first.
_LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def parse_locale(locale_code: str) -> Locale:
    """Parse a locale code with caching.

    Locale values are immutable, so repeated parses of the same code share
    one instance. Thread-safe via lru_cache internal locking.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        Parsed Locale (possibly invalid)

    Example:
        >>> parse_locale("pt-BR") is parse_locale("pt-BR")
        True
    """
    return Locale.from_bcp47(locale_code)


def normalize_locale(locale_code: str) -> str:
    """Convert a locale code to canonical BCP-47 form.

    This is the canonical normalization function. Normalize at the system
    boundary, then use the normalized form for cache keys and lookups.

    Args:
        locale_code: Locale code in any casing, BCP-47 or POSIX separators

    Returns:
        Canonical tag (e.g., "en-US", "zh-Hant-TW"); empty string for codes
        that do not parse

    Example:
        >>> normalize_locale("EN_us")
        'en-US'
        >>> normalize_locale("zh-hant-tw")
        'zh-Hant-TW'
        >>> normalize_locale("???")
        ''
    """
    return parse_locale(locale_code).to_bcp47()


def parse_locale_or_status(locale_code: str) -> StatusOr[Locale]:
    """Parse a locale code, reporting failure as a Status.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        StatusOr holding the valid Locale, or an INVALID_ARGUMENT status

    Example:
        >>> parse_locale_or_status("en-CH").value_or_die().region
        'CH'
        >>> parse_locale_or_status("").status().code
        <StatusCode.INVALID_ARGUMENT: 3>
    """
    locale = parse_locale(locale_code)
    if not locale.is_valid():
        return StatusOr(
            Status(StatusCode.INVALID_ARGUMENT, f"Invalid BCP-47 locale tag: {locale_code!r}")
        )
    return StatusOr(locale)


def parse_locales(locale_codes: str | Iterable[str]) -> tuple[Locale, ...]:
    """Parse several locale codes.

    Accepts an iterable of codes or a single comma-separated string, as
    typically found in configuration values ("en, de-CH, *"). Blank entries
    are skipped; invalid entries are kept as invalid Locales so callers can
    decide how to report them.

    Args:
        locale_codes: Iterable of codes, or a comma-separated string

    Returns:
        Tuple of parsed Locales in input order
    """
    if isinstance(locale_codes, str):
        locale_codes = locale_codes.split(",")
    return tuple(parse_locale(code.strip()) for code in locale_codes if code.strip())


def get_babel_locale(locale: Locale | str) -> BabelLocale:
    """Get a Babel Locale object for a localekit Locale or locale code.

    Args:
        locale: Parsed Locale, or a locale code (BCP-47 or POSIX format)

    Returns:
        Babel Locale object (cached per canonical locale)

    Raises:
        BabelImportError: If Babel is not installed
        InvalidLocaleError: If the locale is invalid or has a ``*`` language
        babel.core.UnknownLocaleError: If CLDR has no data for the locale

    Example:
        >>> get_babel_locale("en-US").territory
        'US'
    """
    require_babel("get_babel_locale")
    if isinstance(locale, str):
        locale = parse_locale(locale)
    return _babel_locale_for(locale)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _babel_locale_for(locale: Locale) -> BabelLocale:
    # A "*" language has no CLDR counterpart, with or without script/region.
    if not locale.is_valid() or locale.language == WILDCARD:
        raise InvalidLocaleError(locale.to_bcp47())
    try:
        return get_babel_locale_class().parse(locale.to_posix())
    except get_unknown_locale_error() as e:
        logger.warning("No CLDR data for locale %s: %s", locale, e)
        raise


def clear_locale_cache() -> None:
    """Clear the parse and Babel Locale caches.

    Use this to free memory or reset state in tests.
    """
    parse_locale.cache_clear()
    _babel_locale_for.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> Locale:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Encoding suffixes (".UTF-8") and modifiers ("@euro") are stripped; the
    "C" and "POSIX" pseudo-locales and unparseable values are skipped.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return en-US as fallback.

    Returns:
        Detected Locale. en-US if not determinable and raise_on_failure is False.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> str(get_system_locale())
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    candidates: list[str | None] = []
    try:
        system_locale, _ = locale_module.getlocale()
        candidates.append(system_locale)
    except (ValueError, AttributeError):
        pass
    candidates.extend(os.environ.get(var) for var in _LOCALE_ENV_VARS)

    for candidate in candidates:
        locale = _parse_system_value(candidate)
        if locale is not None:
            return locale

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    logger.warning("Could not determine system locale. Falling back to %s", DEFAULT_LOCALE)
    return parse_locale(DEFAULT_LOCALE)


def _parse_system_value(value: str | None) -> Locale | None:
    """Parse a POSIX locale value such as 'de_DE.UTF-8@euro'."""
    if not value or value in PSEUDO_LOCALES:
        return None
    locale_code = value.split(".")[0].split("@")[0]
    locale = parse_locale(locale_code)
    if not locale.is_valid() or locale.is_wildcard():
        logger.debug("Ignoring unusable system locale value %r", value)
        return None
    return locale
