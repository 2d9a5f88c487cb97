"""Tests for locale support matching.

Covers Locale.supports, Locale.is_locale_supported and
Locale.is_any_locale_supported: the empty-request short circuit, the
wildcard, and pattern semantics in both specificity directions.

Python 3.13+.
"""

import random
from collections.abc import Iterator

from hypothesis import given
from hypothesis import strategies as st

from localekit.bcp47 import Locale
from tests.strategies import locale_tags


def _locales(*tags: str) -> list[Locale]:
    return [Locale.from_bcp47(tag) for tag in tags]


def _never_iterated() -> Iterator[Locale]:
    raise AssertionError("supported locales must not be inspected")
    yield Locale.invalid()  # pragma: no cover


class TestIsAnyLocaleSupported:
    """Test Locale.is_any_locale_supported."""

    def test_match(self) -> None:
        """A language-only pattern supports a more specific request."""
        assert Locale.is_any_locale_supported(
            _locales("zh-HK", "en-UK"), _locales("en"), default_value=False
        )

    def test_not_match(self) -> None:
        """No supported pattern covers the request."""
        assert not Locale.is_any_locale_supported(
            _locales("zh-tw"), _locales("en", "fr"), default_value=False
        )

    def test_any_locale(self) -> None:
        """The wildcard supports every request."""
        assert Locale.is_any_locale_supported(
            _locales("zh-tw"), _locales("*"), default_value=False
        )

    def test_empty_locales_default_true(self) -> None:
        """Empty request returns the default (True)."""
        assert Locale.is_any_locale_supported([], _locales("en"), default_value=True)

    def test_empty_locales_default_false(self) -> None:
        """Empty request returns the default (False), even with a wildcard."""
        assert not Locale.is_any_locale_supported([], _locales("*"), default_value=False)

    def test_empty_locales_does_not_inspect_supported(self) -> None:
        """Empty request short-circuits before touching supported locales."""
        assert Locale.is_any_locale_supported([], _never_iterated(), default_value=True)

    def test_empty_supported_is_false(self) -> None:
        """Non-empty request against no supported locales is unsupported."""
        assert not Locale.is_any_locale_supported(_locales("en"), [], default_value=True)

    def test_accepts_generators(self) -> None:
        """Requested and supported locales may be one-shot iterables."""
        requested = (Locale.from_bcp47(tag) for tag in ("de", "fr-CA"))
        supported = (Locale.from_bcp47(tag) for tag in ("it", "fr"))
        assert Locale.is_any_locale_supported(requested, supported, default_value=False)

    def test_invalid_request_only_matches_wildcard(self) -> None:
        """Invalid requested locales never match concrete patterns."""
        requested = [Locale.invalid()]
        assert not Locale.is_any_locale_supported(requested, _locales("en"), default_value=True)
        assert Locale.is_any_locale_supported(requested, _locales("*"), default_value=False)

    def test_invalid_supported_skipped(self) -> None:
        """Invalid supported entries match nothing."""
        assert not Locale.is_any_locale_supported(
            _locales("en"), [Locale.invalid()], default_value=False
        )


class TestPatternSemantics:
    """Supported locales act as patterns over requested locales."""

    def test_requested_more_specific_matches(self) -> None:
        """``en`` supports ``en-US`` (empty region acts as a wildcard)."""
        assert Locale.from_bcp47("en").supports(Locale.from_bcp47("en-US"))

    def test_supported_more_specific_does_not_match(self) -> None:
        """``en-US`` does not support ``en`` (populated region must match)."""
        assert not Locale.from_bcp47("en-US").supports(Locale.from_bcp47("en"))
        assert not Locale.is_any_locale_supported(
            _locales("en"), _locales("en-US"), default_value=False
        )

    def test_region_mismatch(self) -> None:
        """Different populated regions do not match."""
        assert not Locale.from_bcp47("en-US").supports(Locale.from_bcp47("en-GB"))

    def test_exact_match(self) -> None:
        """Identical locales match."""
        assert Locale.from_bcp47("zh-Hant-TW").supports(Locale.from_bcp47("ZH-hant-tw"))

    def test_script_pattern(self) -> None:
        """A script pattern requires the same script."""
        pattern = Locale.from_bcp47("zh-Hant")
        assert pattern.supports(Locale.from_bcp47("zh-Hant-TW"))
        assert not pattern.supports(Locale.from_bcp47("zh-Hans-CN"))
        assert not pattern.supports(Locale.from_bcp47("zh-TW"))

    def test_language_wildcard_with_region(self) -> None:
        """``*-US`` supports any language in the US only."""
        pattern = Locale.from_bcp47("*-US")
        assert pattern.supports(Locale.from_bcp47("es-US"))
        assert not pattern.supports(Locale.from_bcp47("es-MX"))

    def test_language_mismatch(self) -> None:
        """Different languages never match."""
        assert not Locale.from_bcp47("en").supports(Locale.from_bcp47("de"))


class TestIsLocaleSupported:
    """Test Locale.is_locale_supported for a single request."""

    def test_supported(self) -> None:
        """Any matching pattern suffices."""
        assert Locale.is_locale_supported(Locale.from_bcp47("de-CH"), _locales("fr", "de"))

    def test_unsupported(self) -> None:
        """No matching pattern."""
        assert not Locale.is_locale_supported(Locale.from_bcp47("de-CH"), _locales("fr", "de-AT"))

    def test_no_supported_locales(self) -> None:
        """Nothing is supported by an empty set."""
        assert not Locale.is_locale_supported(Locale.from_bcp47("de"), [])


class TestMatchingProperties:
    """Property-based tests for matching."""

    @given(locale_tags())
    def test_wildcard_supports_everything(self, tag: str) -> None:
        """``*`` supports every parsed locale."""
        assert Locale.wildcard().supports(Locale.from_bcp47(tag))

    @given(locale_tags())
    def test_locale_supports_itself(self, tag: str) -> None:
        """Matching is reflexive for valid locales."""
        locale = Locale.from_bcp47(tag)
        assert locale.supports(locale)

    @given(
        st.lists(locale_tags(), max_size=5),
        st.lists(st.one_of(locale_tags(), st.just("*")), max_size=5),
        st.booleans(),
        st.randoms(use_true_random=False),
    )
    def test_order_independent(
        self,
        requested_tags: list[str],
        supported_tags: list[str],
        default: bool,
        rnd: random.Random,
    ) -> None:
        """Shuffling either sequence does not change the outcome."""
        requested = _locales(*requested_tags)
        supported = _locales(*supported_tags)
        expected = Locale.is_any_locale_supported(requested, supported, default)

        rnd.shuffle(requested)
        rnd.shuffle(supported)
        assert Locale.is_any_locale_supported(requested, supported, default) == expected
