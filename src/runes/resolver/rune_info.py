"""Resolved metadata record for a single code point."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RuneInfo:
    """Everything the output layer needs to know about one code point.

    Records for invalid code points (surrogates and values past
    ``0x10FFFF``) carry only ``rune`` and ``valid``; every other field is
    ``None``.

    Parameters
    ----------
    rune:
        The code point value as given.
    valid:
        False iff ``rune`` is a surrogate or out of the Unicode range.
    name:
        Character name, ``""`` for unassigned code points.
    categories:
        Matching category codes in lexicographic order.
    utf8:
        UTF-8 encoding, 1 to 4 bytes.
    utf16:
        UTF-16 code units, 1 unit or a surrogate pair.
    """

    rune: int
    valid: bool
    name: str | None = None
    categories: tuple[str, ...] | None = None
    utf8: bytes | None = None
    utf16: tuple[int, ...] | None = None

    @classmethod
    def invalid(cls, rune: int) -> "RuneInfo":
        """Return the record for a code point that is not a scalar value."""
        return cls(rune=rune, valid=False)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-compatible mapping of this record.

        UTF-8 bytes are emitted as a list of small integers rather than
        raw binary so that the document stays plain JSON.
        """
        return {
            "rune": self.rune,
            "name": self.name,
            "valid": self.valid,
            "categories": list(self.categories) if self.categories is not None else None,
            "utf16": list(self.utf16) if self.utf16 is not None else None,
            "utf8": list(self.utf8) if self.utf8 is not None else None,
        }
