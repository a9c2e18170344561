"""Rune metadata resolution.

Exports ``RuneInfo``, the ``UnicodeLookups`` bundle of injected services
and the ``RuneMetadataResolver`` that combines them.  Default lookups
live in ``runes.resolver.unicode_data``.
"""
from __future__ import annotations

from runes.resolver.resolver import (
    RuneMetadataResolver,
    UnicodeLookups,
    encode_utf8,
    encode_utf16,
)
from runes.resolver.rune_info import RuneInfo

__all__ = [
    "RuneInfo",
    "RuneMetadataResolver",
    "UnicodeLookups",
    "encode_utf8",
    "encode_utf16",
]
