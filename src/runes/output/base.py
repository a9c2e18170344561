"""Abstract base class for rune output formats.

Each output format (text, JSON) implements ``OutputPipeline``.  A
pipeline is driven through exactly one run::

    pipeline.begin(sink)
    try:
        for info in records:
            pipeline.emit(info)
    finally:
        pipeline.end()

``begin`` binds the binary ``sink`` and resets all buffering state;
``end`` writes whatever the format still holds and flushes the sink.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, BinaryIO, Final

if TYPE_CHECKING:
    from runes.resolver.rune_info import RuneInfo

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE: Final[int] = 4096


class OutputError(OSError):
    """Raised when writing to or flushing the output sink fails.

    Failed writes are never retried; the bytes involved are dropped.
    """


class _ByteBuffer:
    """Accumulates bytes and hands them to the sink in blocks.

    Any ``OSError`` raised by the sink surfaces as ``OutputError``.
    """

    def __init__(self, sink: BinaryIO, size: int) -> None:
        self._sink = sink
        self._size = size
        self._pending = bytearray()

    def write(self, data: bytes) -> None:
        self._pending += data
        if len(self._pending) >= self._size:
            self.drain()

    def flush(self) -> None:
        self.drain()
        try:
            self._sink.flush()
        except OSError as exc:
            raise OutputError(f"cannot flush output: {exc}") from exc

    def drain(self) -> None:
        """Hand every pending byte to the sink now."""
        if not self._pending:
            return
        data = bytes(self._pending)
        self._pending.clear()
        try:
            self._sink.write(data)
        except OSError as exc:
            raise OutputError(f"cannot write output: {exc}") from exc


class OutputPipeline(ABC):
    """Abstract base class for output formats.

    Subclasses must implement :meth:`name` and :meth:`_write_record`,
    and may override :meth:`_reset` and :meth:`_finish`.

    Parameters
    ----------
    buffer_size:
        Number of pending bytes that triggers a write to the sink.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._buffer_size = buffer_size
        self._buffer: _ByteBuffer | None = None
        self._emitted = 0

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique short name for this format, e.g. ``"text"``."""

    @property
    def emitted(self) -> int:
        """Number of records emitted since the last ``begin``."""
        return self._emitted

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------

    def begin(self, sink: BinaryIO) -> None:
        """Bind ``sink`` and reset all buffering state."""
        self._buffer = _ByteBuffer(sink, self._buffer_size)
        self._emitted = 0
        self._reset()
        logger.debug("Started %s output", self.name)

    def emit(self, info: "RuneInfo") -> None:
        """Hand one resolved record to the format.

        Raises
        ------
        OutputError
            If the format writes through and the sink fails.
        RuntimeError
            If called outside a ``begin``/``end`` pair.
        """
        self._write_record(info, self._active_buffer())
        self._emitted += 1

    def end(self) -> None:
        """Write out everything still held and flush the sink.

        The sink is flushed even if the format's final write fails.

        Raises
        ------
        OutputError
            If the final write or flush fails.
        RuntimeError
            If called outside a ``begin``/``end`` pair.
        """
        buffer = self._active_buffer()
        self._buffer = None
        try:
            self._finish(buffer)
        finally:
            buffer.flush()
            logger.debug("Finished %s output after %d record(s)", self.name, self._emitted)

    def _active_buffer(self) -> _ByteBuffer:
        if self._buffer is None:
            raise RuntimeError(f"{self.name} output used before begin() or after end()")
        return self._buffer

    # ------------------------------------------------------------------
    # Format hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _write_record(self, info: "RuneInfo", buffer: _ByteBuffer) -> None:
        """Consume one record."""

    def _reset(self) -> None:
        """Drop any per-run state held by the format."""

    def _finish(self, buffer: _ByteBuffer) -> None:
        """Write anything the format held back until the end of the run."""
