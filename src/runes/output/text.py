"""Columnar text output: one aligned line per code point.

Each line holds five columns::

    [L Lu] U+0041 'A'     [41]        [41]        LATIN CAPITAL LETTER A
    [L Lo] U+4E2D '中'    [E4 B8 AD]  [4E2D]      CJK UNIFIED IDEOGRAPH-4E2D
    [!]    U+D800          []          []

Every line is drained to the sink before ``emit`` returns, so a sink
failure surfaces from the ``emit`` call for that same record.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Final

from runes.core import codepoint_literal
from runes.output.base import DEFAULT_BUFFER_SIZE, OutputPipeline, _ByteBuffer

if TYPE_CHECKING:
    from runes.resolver.rune_info import RuneInfo

INVALID_MARKER: Final[str] = "[!]"

_CATEGORY_COLUMN: Final[int] = 7
_LITERAL_COLUMN: Final[int] = 15
_ENCODING_COLUMN: Final[int] = 12


def _hex_list(values: "bytes | tuple[int, ...] | None", digits: int) -> str:
    if not values:
        return "[]"
    return "[" + " ".join(f"{value:0{digits}X}" for value in values) + "]"


def format_line(info: "RuneInfo", width: Callable[[int], int]) -> str:
    """Render ``info`` as one newline-terminated text line.

    Parameters
    ----------
    info:
        The record to render.
    width:
        Display-width estimator.  The literal column is padded so that
        ``len(literal) + width - 1`` reaches 15, which keeps the later
        columns aligned after a double-width glyph.  ``len(literal)`` counts
        characters, not UTF-8 bytes, so a multi-byte glyph such as ``中``
        adds one to the literal length rather than three.
    """
    if info.valid:
        categories = "[" + " ".join(info.categories or ()) + "]"
    else:
        categories = INVALID_MARKER

    literal = codepoint_literal(info.rune)
    used = len(literal) + width(info.rune) - 1
    if used < _LITERAL_COLUMN:
        literal += " " * (_LITERAL_COLUMN - used)

    return (
        categories.ljust(_CATEGORY_COLUMN)
        + literal
        + _hex_list(info.utf8, 2).ljust(_ENCODING_COLUMN)
        + _hex_list(info.utf16, 1).ljust(_ENCODING_COLUMN)
        + (info.name or "")
        + "\n"
    )


class TextOutput(OutputPipeline):
    """Streams one formatted line per record.

    Parameters
    ----------
    width:
        Display-width estimator; defaults to
        ``runes.resolver.unicode_data.display_width``.
    buffer_size:
        Initial capacity of the byte buffer.  Each line is drained to the
        sink as soon as it is formatted.
    """

    def __init__(
        self,
        width: Callable[[int], int] | None = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> None:
        super().__init__(buffer_size=buffer_size)
        if width is None:
            from runes.resolver.unicode_data import display_width

            width = display_width
        self._width = width

    @property
    def name(self) -> str:
        return "text"

    def _write_record(self, info: "RuneInfo", buffer: _ByteBuffer) -> None:
        buffer.write(format_line(info, self._width).encode("utf-8"))
        buffer.drain()
