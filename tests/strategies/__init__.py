"""Hypothesis strategies for localekit property-based testing.

Usage:
    from tests.strategies import locale_tags, canonical_tag_parts

Event-Emitting Strategies (HypoFuzz-Optimized):
    - canonical_tag_parts
"""

from .bcp47 import (
    canonical_tag_parts,
    language_subtags,
    locale_tags,
    region_subtags,
    script_subtags,
)

__all__ = [
    "canonical_tag_parts",
    "language_subtags",
    "locale_tags",
    "region_subtags",
    "script_subtags",
]
