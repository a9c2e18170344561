"""Resolution of code points into ``RuneInfo`` records.

The resolver owns no Unicode data.  Name, category and width lookups
are injected through ``UnicodeLookups`` so that tests can substitute a
handful of fake entries for a full character database.

Usage
-----
::

    from runes.resolver import RuneMetadataResolver
    from runes.resolver.unicode_data import default_lookups

    resolver = RuneMetadataResolver(default_lookups())
    info = resolver.resolve(0x1F970)
    info.utf16
    # (0xD83E, 0xDD70)
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from runes.core import BMP_LIMIT, SURROGATE_MIN, is_valid_rune
from runes.resolver.rune_info import RuneInfo

_LOW_SURROGATE_MIN = 0xDC00


@dataclass(frozen=True)
class UnicodeLookups:
    """The external lookup services a resolver depends on.

    Parameters
    ----------
    name:
        Returns the character name of a scalar value, ``""`` if it has
        none.
    categories:
        Maps each short category code to a membership predicate.
        Iteration order carries no meaning.
    width:
        Returns the display width (0, 1 or 2 columns) of a code point.
    """

    name: Callable[[int], str]
    categories: Mapping[str, Callable[[int], bool]]
    width: Callable[[int], int]


def encode_utf16(value: int) -> tuple[int, ...]:
    """Return the UTF-16 code units of the scalar value ``value``."""
    if value < BMP_LIMIT:
        return (value,)
    offset = value - BMP_LIMIT
    return (SURROGATE_MIN + (offset >> 10), _LOW_SURROGATE_MIN + (offset & 0x3FF))


def encode_utf8(value: int) -> bytes:
    """Return the UTF-8 encoding of the scalar value ``value``."""
    return chr(value).encode("utf-8")


class RuneMetadataResolver:
    """Computes a ``RuneInfo`` for one code point at a time.

    Parameters
    ----------
    lookups:
        Name, category and width services to consult.
    """

    def __init__(self, lookups: UnicodeLookups) -> None:
        self._lookups = lookups

    @property
    def lookups(self) -> UnicodeLookups:
        """The lookup services this resolver was built with."""
        return self._lookups

    def resolve(self, value: int) -> RuneInfo:
        """Return the metadata record for ``value``.

        Invalid code points are not an error: they yield a record with
        ``valid=False`` and no other fields populated.
        """
        if not is_valid_rune(value):
            return RuneInfo.invalid(value)

        categories = sorted(
            code for code, predicate in self._lookups.categories.items() if predicate(value)
        )
        return RuneInfo(
            rune=value,
            valid=True,
            name=self._lookups.name(value),
            categories=tuple(categories),
            utf8=encode_utf8(value),
            utf16=encode_utf16(value),
        )

    def width(self, value: int) -> int:
        """Return the display width of ``value`` per the injected estimator."""
        return self._lookups.width(value)
