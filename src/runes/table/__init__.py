"""Code-point table module.

Exports the ``CodepointSet`` bitset and its ``DomainError``.
"""
from __future__ import annotations

from runes.table.codepoint_set import CodepointSet, DomainError

__all__ = ["CodepointSet", "DomainError"]
