"""Code-point request parsing.

Turns command-line tokens into an ordered list of ``CodepointRequest``
values and expands those into the code points to resolve.

Token grammar:
    - ``0x2318`` / ``U+1F970`` — hexadecimal (prefix case-insensitive)
    - ``40`` — decimal
    - ``40-60`` / ``0x41-u+5a`` — inclusive range, each side as above

Single values are passed through as given, even when they are not
valid scalar values, so that they render as invalid.  Ranges only yield
valid scalar values and never extend past ``0x10FFFF``.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Final

from runes.core import MAX_RUNE, is_valid_rune

logger = logging.getLogger(__name__)

_HEX_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9A-Fa-f]+")
_DEC_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_HEX_PREFIXES: Final[tuple[str, ...]] = ("0x", "u+")


class SourceError(ValueError):
    """Raised when a code-point token cannot be parsed.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    token:
        The offending token as given.
    """

    def __init__(self, message: str, token: str) -> None:
        super().__init__(message)
        self.token = token


@dataclass(frozen=True, slots=True)
class CodepointRequest:
    """One requested code point or inclusive range of code points.

    Parameters
    ----------
    first:
        First code point requested.
    last:
        Last code point requested; equal to ``first`` for single values.
    ranged:
        True if the request came from ``A-B`` range syntax.
    """

    first: int
    last: int
    ranged: bool = False

    @classmethod
    def single(cls, value: int) -> "CodepointRequest":
        return cls(first=value, last=value)

    @classmethod
    def everything(cls) -> "CodepointRequest":
        """Return the request covering the whole codespace."""
        return cls(first=0, last=MAX_RUNE, ranged=True)


def parse_number(text: str, token: str | None = None) -> int:
    """Parse one decimal or ``0x``/``u+`` hexadecimal number.

    Raises
    ------
    SourceError
        If ``text`` is not a well-formed non-negative number.
    """
    token = text if token is None else token
    lowered = text.strip().lower()
    if lowered.startswith(_HEX_PREFIXES):
        digits = lowered[2:]
        if _HEX_DIGITS.fullmatch(digits):
            return int(digits, 16)
        raise SourceError(f"invalid hexadecimal code point {text!r} in {token!r}", token)
    if _DEC_DIGITS.fullmatch(lowered):
        return int(lowered, 10)
    raise SourceError(f"invalid code point {text!r} in {token!r}", token)


def parse_token(token: str) -> CodepointRequest:
    """Parse a single value or ``A-B`` range token.

    Raises
    ------
    SourceError
        If the token is malformed or its range is reversed.
    """
    parts = token.split("-")
    if len(parts) == 1:
        return CodepointRequest.single(parse_number(parts[0], token))
    if len(parts) != 2:
        raise SourceError(f"invalid code point range {token!r}", token)

    first = parse_number(parts[0], token)
    last = parse_number(parts[1], token)
    if first > last:
        raise SourceError(
            f"range start U+{first:04X} is greater than range end U+{last:04X} in {token!r}",
            token,
        )
    return CodepointRequest(first=first, last=last, ranged=True)


def parse_tokens(tokens: Iterable[str]) -> list[CodepointRequest]:
    """Parse every token in order."""
    requests = [parse_token(token) for token in tokens]
    logger.debug("Parsed %d code-point request(s)", len(requests))
    return requests


def string_requests(text: str) -> list[CodepointRequest]:
    """Return one single-value request per character of ``text``."""
    return [CodepointRequest.single(ord(char)) for char in text]


def iter_codepoints(requests: Iterable[CodepointRequest]) -> Iterator[int]:
    """Expand ``requests`` into code points, in request order."""
    for request in requests:
        if not request.ranged:
            yield request.first
            continue
        for value in range(request.first, min(request.last, MAX_RUNE) + 1):
            if is_valid_rune(value):
                yield value
