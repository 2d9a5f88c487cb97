"""Shared constants for localekit.

This module provides centralized configuration constants used by the
locale parser, the locale utilities and the result container. Placing
constants here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Tag syntax: Separators and the wildcard marker
- Subtag shapes: Lengths that classify a segment as language/script/region
- Cache limits: Memory bounds for cached parsing and Babel lookups
- Fallbacks: Locale used when the system locale cannot be detected

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Tag syntax
    "SUBTAG_SEPARATOR",
    "POSIX_SEPARATOR",
    "WILDCARD",
    # Subtag shapes
    "LANGUAGE_LENGTHS",
    "SCRIPT_LENGTH",
    "REGION_ALPHA_LENGTH",
    "REGION_NUMERIC_LENGTH",
    "SINGLETON_LENGTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Fallbacks
    "DEFAULT_LOCALE",
    "PSEUDO_LOCALES",
]

# ============================================================================
# TAG SYNTAX
# ============================================================================

# BCP-47 separates subtags with hyphens (zh-Hant-TW).
SUBTAG_SEPARATOR: str = "-"

# POSIX/Babel identifiers use underscores (zh_Hant_TW). Accepted on input.
POSIX_SEPARATOR: str = "_"

# Language value of the locale that matches every other locale.
WILDCARD: str = "*"

# ============================================================================
# SUBTAG SHAPES
# ============================================================================
#
# Segments are classified by shape, not by position:
#
#   language  ISO 639       2-3 letters      en, fil
#   script    ISO 15924     4 letters        Hant, Latn
#   region    ISO 3166-1    2 letters        TW, CH
#             UN M.49       3 digits         419
#   singleton BCP-47        1 character      u, x (starts an extension)
#
# ============================================================================

LANGUAGE_LENGTHS: frozenset[int] = frozenset({2, 3})
SCRIPT_LENGTH: int = 4
REGION_ALPHA_LENGTH: int = 2
REGION_NUMERIC_LENGTH: int = 3
SINGLETON_LENGTH: int = 1

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached parse results and Babel Locale objects.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# FALLBACKS
# ============================================================================

# Returned by get_system_locale() when nothing can be detected.
DEFAULT_LOCALE: str = "en-US"

# Values reported by the C library that do not name a real locale.
PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})
