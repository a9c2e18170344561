"""Rune output formats.

Public API
----------
The stable surface is ``create_pipeline``, ``available_formats``, the
``OutputPipeline`` base class and ``OutputError``.

Example
-------
::

    import sys
    from runes.output import create_pipeline

    pipeline = create_pipeline("json")
    pipeline.begin(sys.stdout.buffer)
    try:
        for info in records:
            pipeline.emit(info)
    finally:
        pipeline.end()
"""
from __future__ import annotations

import logging

from runes.output.base import OutputError, OutputPipeline
from runes.output.json_output import JsonOutput
from runes.output.text import TextOutput, format_line

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, type[OutputPipeline]] = {
    "json": JsonOutput,
    "text": TextOutput,
}


def create_pipeline(output_format: str = "text", **options: object) -> OutputPipeline:
    """Instantiate the output pipeline registered as ``output_format``.

    Parameters
    ----------
    output_format:
        ``"text"`` or ``"json"``.
    **options:
        Keyword arguments forwarded to the pipeline constructor.

    Raises
    ------
    ValueError
        If ``output_format`` is not a registered format.
    """
    if output_format not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY))
        raise ValueError(
            f"Unknown output format {output_format!r}. Available formats: {available}"
        )
    logger.debug("Selected %s output", output_format)
    return _REGISTRY[output_format](**options)  # type: ignore[arg-type]


def available_formats() -> list[str]:
    """Return the list of registered output format names."""
    return sorted(_REGISTRY)


__all__ = [
    "create_pipeline",
    "available_formats",
    "format_line",
    "JsonOutput",
    "OutputError",
    "OutputPipeline",
    "TextOutput",
]
