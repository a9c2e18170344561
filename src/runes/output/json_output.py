"""JSON output: the whole run as one indented JSON array.

Records are held in memory until ``end()``, then serialized in a single
write.  A sink failure therefore only becomes visible at ``end()``.
Each element has the keys ``rune``, ``name``, ``valid``, ``categories``,
``utf16`` and ``utf8``; ``utf8`` is a list of integers 0-255.  Invalid
records carry ``null`` for ``name``, ``categories``, ``utf16`` and ``utf8``
rather than an empty name and empty arrays, and a valid rune that matches
no category carries ``[]`` rather than ``null``.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING

from runes.output.base import DEFAULT_BUFFER_SIZE, OutputPipeline, _ByteBuffer

if TYPE_CHECKING:
    from runes.resolver.rune_info import RuneInfo


class JsonOutput(OutputPipeline):
    """Accumulates records and writes them as a JSON array at the end.

    Parameters
    ----------
    indent:
        Indentation passed to :func:`json.dumps`.
    buffer_size:
        Number of pending bytes that triggers a write to the sink.
    """

    def __init__(self, indent: int = 2, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        super().__init__(buffer_size=buffer_size)
        self._indent = indent
        self._records: list[dict[str, object]] = []

    @property
    def name(self) -> str:
        return "json"

    def _reset(self) -> None:
        self._records = []

    def _write_record(self, info: "RuneInfo", buffer: _ByteBuffer) -> None:
        self._records.append(info.to_dict())

    def _finish(self, buffer: _ByteBuffer) -> None:
        try:
            document = json.dumps(self._records, indent=self._indent)
        finally:
            self._records = []
        buffer.write((document + "\n").encode("utf-8"))
