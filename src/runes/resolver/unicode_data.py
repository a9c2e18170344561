"""Default Unicode lookup services backed by :mod:`unicodedata`.

The data reflects whichever Unicode Character Database snapshot the
running interpreter ships.  Nothing here is consulted implicitly: pass
``default_lookups()`` to ``RuneMetadataResolver`` to use it.
"""
from __future__ import annotations

import unicodedata
from collections.abc import Callable
from typing import Final

from runes.core import is_valid_rune
from runes.resolver.resolver import UnicodeLookups

GENERAL_CATEGORIES: Final[tuple[str, ...]] = (
    "Cc", "Cf", "Co", "Cs",
    "Ll", "Lm", "Lo", "Lt", "Lu",
    "Mc", "Me", "Mn",
    "Nd", "Nl", "No",
    "Pc", "Pd", "Pe", "Pf", "Pi", "Po", "Ps",
    "Sc", "Sk", "Sm", "So",
    "Zl", "Zp", "Zs",
)
"""Two-letter general categories reported for a code point.

``Cn`` (unassigned) is deliberately absent, so the major class ``C``
covers only ``Cc Cf Co Cs``.
"""

_SOFT_HYPHEN: Final[int] = 0x00AD
_HANGUL_JUNGSEONG_FILLER: Final[int] = 0x1160
_HANGUL_JONGSEONG_SSANGNIEUN: Final[int] = 0x11FF
_ZERO_WIDTH_CATEGORIES: Final[frozenset[str]] = frozenset({"Me", "Mn", "Cf"})


def general_category(value: int) -> str:
    """Return the two-letter general category of ``value``."""
    return unicodedata.category(chr(value))


def rune_name(value: int) -> str:
    """Return the character name of ``value``.

    C0 and C1 controls have no formal name and are reported as
    ``"<control>"``; any other unnamed code point yields ``""``.
    """
    name = unicodedata.name(chr(value), "")
    if not name and general_category(value) == "Cc":
        return "<control>"
    return name


def _category_is(code: str) -> Callable[[int], bool]:
    def predicate(value: int) -> bool:
        return general_category(value) == code

    return predicate


def _category_in(codes: frozenset[str]) -> Callable[[int], bool]:
    def predicate(value: int) -> bool:
        return general_category(value) in codes

    return predicate


def category_predicates() -> dict[str, Callable[[int], bool]]:
    """Build the category-predicate registry.

    Returns one predicate per two-letter general category and one per
    major class (the first letter), keyed by short code.
    """
    registry: dict[str, Callable[[int], bool]] = {
        code: _category_is(code) for code in GENERAL_CATEGORIES
    }
    for major in sorted({code[0] for code in GENERAL_CATEGORIES}):
        members = frozenset(code for code in GENERAL_CATEGORIES if code[0] == major)
        registry[major] = _category_in(members)
    return registry


def display_width(value: int) -> int:
    """Estimate how many terminal columns ``value`` occupies.

    Follows the usual ``wcwidth`` rules: NUL, controls, combining and
    format characters take no room; East Asian Wide and Fullwidth
    characters take two columns; everything else takes one.
    """
    if not is_valid_rune(value) or value == 0:
        return 0
    if value < 0x20 or 0x7F <= value < 0xA0:
        return 0

    category = general_category(value)
    if category in _ZERO_WIDTH_CATEGORIES and value != _SOFT_HYPHEN:
        return 0
    if _HANGUL_JUNGSEONG_FILLER <= value <= _HANGUL_JONGSEONG_SSANGNIEUN:
        return 0

    if unicodedata.east_asian_width(chr(value)) in ("W", "F"):
        return 2
    return 1


def default_lookups() -> UnicodeLookups:
    """Return lookups backed by the interpreter's Unicode database."""
    return UnicodeLookups(
        name=rune_name,
        categories=category_predicates(),
        width=display_width,
    )
