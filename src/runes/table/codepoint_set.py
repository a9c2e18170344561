"""Fixed-domain bitset over the Unicode codespace.

A ``CodepointSet`` stores membership for every integer in
``[0, 0x10FFFF]`` as a flat list of 17,408 words, each word holding 64
bits.  Bit ``r % 64`` of word ``r // 64`` is set iff ``r`` is a member.
The domain never grows or shrinks.

Usage
-----
::

    from runes.table import CodepointSet

    table = CodepointSet()
    table.set(*map(ord, "abcd"))
    table.set_range(ord("A"), ord("Z"))
    table.unset_range(ord("M"), ord("Q"))
    str(table)
    # "[U+0041 'A'-U+004C 'L',U+0052 'R'-U+005A 'Z',U+0061 'a'-U+0064 'd']"
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from runes.core import DOMAIN_SIZE, MAX_RUNE, codepoint_literal, in_domain

WORD_BITS: Final[int] = 64
WORD_COUNT: Final[int] = -(-DOMAIN_SIZE // WORD_BITS)
"""Number of words needed to cover the domain (17,408)."""

_FULL_WORD: Final[int] = (1 << WORD_BITS) - 1


class DomainError(ValueError):
    """Raised when a mutation names a value outside ``[0, 0x10FFFF]``.

    Also raised by the range operations when ``first > last``.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    value:
        The offending value.
    """

    def __init__(self, message: str, value: int) -> None:
        super().__init__(message)
        self.value = value


def _check_domain(value: int) -> None:
    if not in_domain(value):
        raise DomainError(f"{codepoint_literal(value)} is outside the Unicode range", value)


class CodepointSet:
    """A mutable set of code points backed by a fixed-length bitset.

    Mutations that name out-of-domain values raise ``DomainError`` before
    touching any bit, so a failed call never leaves a half-applied batch
    behind.  ``unset`` is the exception: removing a value that can never
    be a member is a no-op.
    """

    __slots__ = ("_words",)

    def __init__(self) -> None:
        self._words: list[int] = [0] * WORD_COUNT

    # ------------------------------------------------------------------
    # Single-value mutation
    # ------------------------------------------------------------------

    def set(self, *values: int) -> None:
        """Add every value in ``values`` to the set.

        Raises
        ------
        DomainError
            If any value lies outside ``[0, 0x10FFFF]``.  The whole batch
            is checked first; on failure the set is left unchanged.
        """
        for value in values:
            _check_domain(value)
        words = self._words
        for value in values:
            words[value >> 6] |= 1 << (value & 63)

    def unset(self, *values: int) -> None:
        """Remove every value in ``values`` from the set.

        Out-of-domain values are ignored.
        """
        words = self._words
        for value in values:
            if in_domain(value):
                words[value >> 6] &= ~(1 << (value & 63))

    # ------------------------------------------------------------------
    # Range mutation
    # ------------------------------------------------------------------

    def set_range(self, first: int, last: int) -> None:
        """Add every value in the inclusive range ``[first, last]``.

        Raises
        ------
        DomainError
            If ``first > last`` or either bound lies outside the domain.
        """
        self._apply_range(first, last, True)

    def unset_range(self, first: int, last: int) -> None:
        """Remove every value in the inclusive range ``[first, last]``.

        Raises
        ------
        DomainError
            If ``first > last`` or either bound lies outside the domain.
        """
        self._apply_range(first, last, False)

    def _apply_range(self, first: int, last: int, present: bool) -> None:
        if first > last:
            raise DomainError(
                f"from rune {codepoint_literal(first)} is greater than "
                f"to rune {codepoint_literal(last)}",
                first,
            )
        _check_domain(first)
        _check_domain(last)

        first_word, first_bit = divmod(first, WORD_BITS)
        last_word, last_bit = divmod(last, WORD_BITS)

        if first_word == last_word:
            self._apply_mask(first_word, ((1 << (last_bit - first_bit + 1)) - 1) << first_bit, present)
            return

        # Boundary words are masked; everything strictly between is whole.
        self._apply_mask(first_word, _FULL_WORD & ~((1 << first_bit) - 1), present)
        inner = last_word - first_word - 1
        if inner:
            self._words[first_word + 1:last_word] = [_FULL_WORD if present else 0] * inner
        self._apply_mask(last_word, (1 << (last_bit + 1)) - 1, present)

    def _apply_mask(self, index: int, mask: int, present: bool) -> None:
        if present:
            self._words[index] |= mask
        else:
            self._words[index] &= ~mask

    def clear(self) -> None:
        """Remove every member."""
        self._words = [0] * WORD_COUNT

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, value: int) -> bool:
        """Return True if ``value`` is a member.

        Never raises: out-of-domain values are simply not members.
        """
        if not in_domain(value):
            return False
        return bool(self._words[value >> 6] >> (value & 63) & 1)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __len__(self) -> int:
        """Return the number of members."""
        return sum(word.bit_count() for word in self._words)

    def __iter__(self) -> Iterator[int]:
        """Yield members in ascending order."""
        for index, word in enumerate(self._words):
            base = index * WORD_BITS
            while word:
                low = word & -word
                yield base + low.bit_length() - 1
                word ^= low

    def runs(self) -> Iterator[tuple[int, int]]:
        """Yield maximal inclusive runs ``(start, end)`` in ascending order.

        A single linear pass over the domain with an open-run marker.
        Empty words close an open run and full words extend it without
        looking at individual bits.
        """
        start: int | None = None
        for index, word in enumerate(self._words):
            base = index * WORD_BITS
            if word == 0:
                if start is not None:
                    yield start, base - 1
                    start = None
                continue
            if word == _FULL_WORD:
                if start is None:
                    start = base
                continue
            for bit in range(WORD_BITS):
                if word >> bit & 1:
                    if start is None:
                        start = base + bit
                elif start is not None:
                    yield start, base + bit - 1
                    start = None
        if start is not None:
            yield start, MAX_RUNE

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def serialize(self) -> str:
        """Return the canonical run-length form of the set.

        Runs are comma-separated inside square brackets.  A run of one
        value renders as a single literal, longer runs as
        ``first-last``::

            [U+0041 'A'-U+004C 'L',U+0052 'R'-U+005A 'Z',U+10FFFF]

        The empty set serializes as ``[]``.
        """
        parts: list[str] = []
        for start, end in self.runs():
            if start == end:
                parts.append(codepoint_literal(start))
            else:
                parts.append(f"{codepoint_literal(start)}-{codepoint_literal(end)}")
        return "[" + ",".join(parts) + "]"

    def __str__(self) -> str:
        return self.serialize()

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def copy(self) -> "CodepointSet":
        """Return an independent copy of this set."""
        clone = CodepointSet.__new__(CodepointSet)
        clone._words = list(self._words)
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodepointSet):
            return NotImplemented
        return self._words == other._words

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CodepointSet(members={len(self)})"
