"""Core domain helpers.

Constants and pure functions about the code-point domain. Submodules in
core/ must not import from table/, resolver/, output/ or cli/.
"""
from __future__ import annotations

from runes.core.codepoints import (
    BMP_LIMIT,
    DOMAIN_SIZE,
    MAX_RUNE,
    SURROGATE_MAX,
    SURROGATE_MIN,
    codepoint_literal,
    in_domain,
    is_surrogate,
    is_valid_rune,
)

__all__ = [
    "BMP_LIMIT",
    "DOMAIN_SIZE",
    "MAX_RUNE",
    "SURROGATE_MAX",
    "SURROGATE_MIN",
    "codepoint_literal",
    "in_domain",
    "is_surrogate",
    "is_valid_rune",
]
