"""Enumerations for localekit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SubtagKind(StrEnum):
    """Kind of a BCP-47 subtag, decided by the shape of the segment.

    StrEnum provides automatic string conversion: str(SubtagKind.SCRIPT) == "script"
    """

    LANGUAGE = "language"
    """ISO 639 language code or the wildcard: en, fil, *"""

    SCRIPT = "script"
    """ISO 15924 script code: Hant, Latn"""

    REGION = "region"
    """ISO 3166-1 alpha-2 or UN M.49 area code: TW, 419"""

    SINGLETON = "singleton"
    """Extension or private-use introducer: u, x"""

    UNKNOWN = "unknown"
    """Any segment that matches no recognized shape (variants, garbage)"""


__all__ = [
    "SubtagKind",
]
