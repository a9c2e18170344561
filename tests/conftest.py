"""Shared test fixtures for runes.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from runes.resolver import UnicodeLookups


class FailingSink:
    """A binary sink whose every write fails like a closed pipe."""

    def __init__(self) -> None:
        self.write_attempts = 0
        self.flushes = 0

    def write(self, data: bytes) -> int:
        self.write_attempts += 1
        raise OSError("broken pipe")

    def flush(self) -> None:
        self.flushes += 1


_FAKE_NAMES: dict[int, str] = {
    0x41: "LATIN CAPITAL LETTER A",
    0x61: "LATIN SMALL LETTER A",
    0x4E2D: "CJK UNIFIED IDEOGRAPH-4E2D",
    0x1F970: "SMILING FACE WITH SMILING EYES AND THREE HEARTS",
}


def _is_upper(value: int) -> bool:
    return 0x41 <= value <= 0x5A


def _is_lower(value: int) -> bool:
    return 0x61 <= value <= 0x7A


@pytest.fixture()
def fake_lookups() -> UnicodeLookups:
    """Return a tiny lookup registry covering ASCII letters and digits.

    The category mapping lists ``Lu`` before ``L`` so that tests can see
    the resolver sort the matches.
    """
    return UnicodeLookups(
        name=lambda value: _FAKE_NAMES.get(value, ""),
        categories={
            "Lu": _is_upper,
            "Nd": lambda value: 0x30 <= value <= 0x39,
            "Ll": _is_lower,
            "L": lambda value: _is_upper(value) or _is_lower(value),
        },
        width=lambda value: 2 if value == 0x4E2D else 1,
    )


@pytest.fixture()
def failing_sink() -> FailingSink:
    """Return a sink that raises ``OSError`` on every write."""
    return FailingSink()


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"
