"""Code-point domain constants and the shared literal rendering.

Everything that needs to know where the Unicode scalar-value space ends,
where the surrogate block sits, or how a single code point is written
out as ``U+XXXX 'c'`` imports it from here.
"""
from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Domain constants
# ---------------------------------------------------------------------------

MAX_RUNE: Final[int] = 0x10FFFF
"""Largest code point in the Unicode codespace."""

DOMAIN_SIZE: Final[int] = MAX_RUNE + 1

SURROGATE_MIN: Final[int] = 0xD800
SURROGATE_MAX: Final[int] = 0xDFFF

BMP_LIMIT: Final[int] = 0x10000
"""First code point that needs a UTF-16 surrogate pair."""


def in_domain(value: int) -> bool:
    """Return True if ``value`` lies within ``[0, MAX_RUNE]``."""
    return 0 <= value <= MAX_RUNE


def is_surrogate(value: int) -> bool:
    """Return True if ``value`` lies within the surrogate block."""
    return SURROGATE_MIN <= value <= SURROGATE_MAX


def is_valid_rune(value: int) -> bool:
    """Return True if ``value`` is a Unicode scalar value.

    Scalar values are code points in the domain that are not surrogates.
    Only scalar values have a UTF-8 or UTF-16 encoding of their own.
    """
    return in_domain(value) and not is_surrogate(value)


def codepoint_literal(value: int) -> str:
    """Render ``value`` as ``U+XXXX``, followed by the quoted character if printable.

    The hex part is uppercase and zero-padded to at least four digits::

        >>> codepoint_literal(0x41)
        "U+0041 'A'"
        >>> codepoint_literal(0x10FFFF)
        'U+10FFFF'

    Surrogates and out-of-domain values never carry a quoted character.
    """
    literal = f"U+{value:04X}"
    if is_valid_rune(value):
        char = chr(value)
        if char.isprintable():
            literal += f" '{char}'"
    return literal
