"""Code-point sources.

Exports the token parser and the expansion of requests into code points.
"""
from __future__ import annotations

from runes.sources.parser import (
    CodepointRequest,
    SourceError,
    iter_codepoints,
    parse_number,
    parse_token,
    parse_tokens,
    string_requests,
)

__all__ = [
    "CodepointRequest",
    "SourceError",
    "iter_codepoints",
    "parse_number",
    "parse_token",
    "parse_tokens",
    "string_requests",
]
