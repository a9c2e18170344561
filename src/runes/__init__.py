"""runes — Unicode code point inspector: metadata resolution, text/JSON output, code-point tables.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import runes

    # Resolve one code point
    info = runes.resolve(0x1F970)
    info.utf16
    # (55358, 56688)

    # Render a few code points as aligned text or JSON
    text = runes.render([0x41, 0x2318])
    document = runes.render(range(0x41, 0x44), output_format="json")

    # Accumulate code points into a table
    table = runes.codepoint_set("abcd")
    str(table)
    # "[U+0061 'a'-U+0064 'd']"

    runes.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from runes.resolver.rune_info import RuneInfo
    from runes.table.codepoint_set import CodepointSet


def resolve(value: int) -> "RuneInfo":
    """Resolve ``value`` against the interpreter's Unicode database.

    Parameters
    ----------
    value:
        Any integer; surrogates and values past ``0x10FFFF`` yield an
        invalid record rather than an error.

    Returns
    -------
    RuneInfo
        The resolved metadata record.
    """
    from runes.resolver import RuneMetadataResolver
    from runes.resolver.unicode_data import default_lookups

    return RuneMetadataResolver(default_lookups()).resolve(value)


def render(codepoints: Iterable[int], output_format: str = "text") -> str:
    """Resolve ``codepoints`` and render them in ``output_format``.

    Parameters
    ----------
    codepoints:
        Code points to resolve, in output order.
    output_format:
        ``"text"`` or ``"json"``.

    Returns
    -------
    str
        The complete rendered output.

    Raises
    ------
    ValueError
        If ``output_format`` is not a known format.
    """
    import io

    from runes.output import create_pipeline
    from runes.resolver import RuneMetadataResolver
    from runes.resolver.unicode_data import default_lookups

    resolver = RuneMetadataResolver(default_lookups())
    options: dict[str, object] = {"width": resolver.width} if output_format == "text" else {}
    pipeline = create_pipeline(output_format, **options)

    sink = io.BytesIO()
    pipeline.begin(sink)
    try:
        for value in codepoints:
            pipeline.emit(resolver.resolve(value))
    finally:
        pipeline.end()
    return sink.getvalue().decode("utf-8")


def codepoint_set(characters: str = "") -> "CodepointSet":
    """Return a new ``CodepointSet`` holding every character of ``characters``."""
    from runes.table import CodepointSet

    table = CodepointSet()
    table.set(*map(ord, characters))
    return table


__all__ = [
    "__version__",
    "resolve",
    "render",
    "codepoint_set",
]
