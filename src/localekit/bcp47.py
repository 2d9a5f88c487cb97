"""BCP-47 locale tags: parsing and support matching.

Decomposes a locale tag into language, script and region subtags and
answers whether requested locales are covered by a set of supported locale
patterns.

Parsing:
    - Case-insensitive; ``-`` separates subtags (``_`` is accepted too)
    - The first segment must be a language (2-3 letters) or the wildcard ``*``
    - Later segments are classified by shape, not position:
        4 letters          -> script  (titlecased)
        2 letters/3 digits -> region  (uppercased)
    - The first script and first region win; other segments are ignored
    - A singleton (``u``, ``x``, ...) starts an extension; the rest is ignored
    - Anything else yields Locale.invalid(); parsing never raises

Matching:
    A supported locale acts as a pattern. Its populated subtags must equal
    the requested locale's; empty subtags (and a ``*`` language) match
    anything. ``en`` therefore supports ``en-GB``, while ``en-US`` does not
    support ``en``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from localekit.constants import (
    LANGUAGE_LENGTHS,
    POSIX_SEPARATOR,
    REGION_ALPHA_LENGTH,
    REGION_NUMERIC_LENGTH,
    SCRIPT_LENGTH,
    SINGLETON_LENGTH,
    SUBTAG_SEPARATOR,
    WILDCARD,
)
from localekit.diagnostics.errors import InvalidLocaleError
from localekit.enums import SubtagKind

__all__ = ["Locale", "classify_subtag"]

logger = logging.getLogger(__name__)


def _is_alpha(segment: str) -> bool:
    return segment.isascii() and segment.isalpha()


def _is_digit(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def classify_subtag(segment: str, *, first: bool = False) -> SubtagKind:
    """Classify a tag segment by its shape.

    Args:
        segment: One separator-delimited segment of a locale tag
        first: True for the leading segment, which can only be a language

    Returns:
        SubtagKind for the segment; UNKNOWN if no shape matches

    Example:
        >>> classify_subtag("zh", first=True)
        <SubtagKind.LANGUAGE: 'language'>
        >>> classify_subtag("Hant")
        <SubtagKind.SCRIPT: 'script'>
        >>> classify_subtag("419")
        <SubtagKind.REGION: 'region'>
    """
    length = len(segment)
    if first:
        if segment == WILDCARD or (length in LANGUAGE_LENGTHS and _is_alpha(segment)):
            return SubtagKind.LANGUAGE
        return SubtagKind.UNKNOWN

    if length == SINGLETON_LENGTH and segment.isascii() and segment.isalnum():
        return SubtagKind.SINGLETON
    if length == SCRIPT_LENGTH and _is_alpha(segment):
        return SubtagKind.SCRIPT
    if (length == REGION_ALPHA_LENGTH and _is_alpha(segment)) or (
        length == REGION_NUMERIC_LENGTH and _is_digit(segment)
    ):
        return SubtagKind.REGION
    return SubtagKind.UNKNOWN


@dataclass(frozen=True, slots=True)
class Locale:
    """Parsed BCP-47 locale tag.

    Immutable, hashable, thread-safe. Subtag casing is normalized at parse
    time, so comparisons are case-insensitive with respect to the input.

    Use the factories rather than the constructor:
        Locale.from_bcp47(tag)  -> parsed locale (possibly invalid)
        Locale.invalid()        -> canonical invalid locale
        Locale.wildcard()       -> the ``*`` locale matching everything

    Attributes:
        language: Lowercase ISO 639 code, ``*``, or empty when invalid
        script: Titlecase ISO 15924 code or empty
        region: Uppercase ISO 3166-1 alpha-2 / UN M.49 code or empty
        valid: Validity flag set at parse time (see ``is_valid()``)

    Example:
        >>> locale = Locale.from_bcp47("ZH-hant-tw")
        >>> locale.language, locale.script, locale.region
        ('zh', 'Hant', 'TW')
        >>> str(locale)
        'zh-Hant-TW'
    """

    language: str = ""
    script: str = ""
    region: str = ""
    valid: bool = False

    def __post_init__(self) -> None:
        """Reject field combinations that no parse can produce.

        Raises:
            ValueError: If an invalid Locale carries subtags, or a valid one
                has no language
        """
        if self.valid and not self.language:
            msg = "A valid Locale requires a language subtag"
            raise ValueError(msg)
        if not self.valid and (self.language or self.script or self.region):
            msg = (
                f"An invalid Locale cannot carry subtags "
                f"({self.language!r}, {self.script!r}, {self.region!r}); "
                "use Locale.from_bcp47() to parse a tag"
            )
            raise ValueError(msg)

    @classmethod
    def from_bcp47(cls, tag: str) -> Locale:
        """Parse a BCP-47 tag.

        Never raises for string input: unparseable tags yield
        ``Locale.invalid()``.

        Args:
            tag: Locale tag such as ``en-CH``, ``zh-Hant-TW`` or ``*``

        Returns:
            Parsed Locale; check ``is_valid()`` before use
        """
        normalized = tag.strip().replace(POSIX_SEPARATOR, SUBTAG_SEPARATOR)
        segments = normalized.split(SUBTAG_SEPARATOR)
        language = segments[0]
        if classify_subtag(language, first=True) is not SubtagKind.LANGUAGE:
            logger.debug("Rejected locale tag %r: %r is not a language subtag", tag, language)
            return cls.invalid()

        script = ""
        region = ""
        for segment in segments[1:]:
            kind = classify_subtag(segment)
            if kind is SubtagKind.SINGLETON:
                break
            if kind is SubtagKind.SCRIPT and not script:
                script = segment.title()
            elif kind is SubtagKind.REGION and not region:
                region = segment.upper()
            else:
                logger.debug("Ignoring subtag %r in locale tag %r", segment, tag)

        return cls(language.lower(), script, region, valid=True)

    @classmethod
    def from_bcp47_or_raise(cls, tag: str) -> Locale:
        """Parse a BCP-47 tag, raising on invalid input.

        Raises:
            InvalidLocaleError: If the tag does not start with a language subtag
        """
        locale = cls.from_bcp47(tag)
        if not locale.valid:
            raise InvalidLocaleError(tag)
        return locale

    @classmethod
    def invalid(cls) -> Locale:
        """Return the canonical invalid Locale (all subtags empty)."""
        return cls()

    @classmethod
    def wildcard(cls) -> Locale:
        """Return the ``*`` Locale, which supports every requested locale."""
        return cls(WILDCARD, valid=True)

    def is_valid(self) -> bool:
        """Return True if the tag parsed successfully."""
        return self.valid

    def is_wildcard(self) -> bool:
        """Return True for the ``*`` locale (no script or region)."""
        return self.valid and self.language == WILDCARD and not self.script and not self.region

    def _subtags(self) -> tuple[str, ...]:
        return tuple(part for part in (self.language, self.script, self.region) if part)

    def to_bcp47(self) -> str:
        """Render the canonical tag, e.g. ``zh-Hant-TW``. Invalid -> ``""``."""
        return SUBTAG_SEPARATOR.join(self._subtags())

    def to_posix(self) -> str:
        """Render the POSIX/Babel identifier, e.g. ``zh_Hant_TW``."""
        return POSIX_SEPARATOR.join(self._subtags())

    def __str__(self) -> str:
        return self.to_bcp47()

    def supports(self, requested: Locale) -> bool:
        """Check whether this locale, used as a pattern, covers ``requested``.

        The wildcard covers everything, including invalid locales. Otherwise
        both locales must be valid and every populated subtag of this locale
        must equal the corresponding subtag of ``requested``.
        """
        if not self.valid:
            return False
        if self.is_wildcard():
            return True
        if not requested.valid:
            return False
        return (
            (self.language in (WILDCARD, requested.language))
            and (not self.script or self.script == requested.script)
            and (not self.region or self.region == requested.region)
        )

    @staticmethod
    def is_locale_supported(locale: Locale, supported_locales: Iterable[Locale]) -> bool:
        """Return True if any of ``supported_locales`` supports ``locale``."""
        return any(supported.supports(locale) for supported in supported_locales)

    @staticmethod
    def is_any_locale_supported(
        locales: Iterable[Locale],
        supported_locales: Iterable[Locale],
        default_value: bool,
    ) -> bool:
        """Check whether any requested locale is supported.

        Args:
            locales: Requested locales (e.g. detected languages of a text)
            supported_locales: Supported locale patterns; ``*`` matches all
            default_value: Result when ``locales`` is empty, letting callers
                decide whether "no locale specified" means allow or deny

        Returns:
            ``default_value`` if ``locales`` is empty; otherwise True if any
            requested locale is supported by any supported pattern

        Example:
            >>> requested = [Locale.from_bcp47("zh-HK"), Locale.from_bcp47("en-GB")]
            >>> Locale.is_any_locale_supported(requested, [Locale.from_bcp47("en")], False)
            True
        """
        requested = tuple(locales)
        if not requested:
            return default_value
        supported = tuple(supported_locales)
        return any(Locale.is_locale_supported(locale, supported) for locale in requested)
