"""Unit tests for runes.resolver.unicode_data — the default lookup services."""
from __future__ import annotations

import pytest

from runes.resolver.unicode_data import (
    GENERAL_CATEGORIES,
    category_predicates,
    default_lookups,
    display_width,
    rune_name,
)


class TestRuneName:
    def test_named_character(self) -> None:
        assert rune_name(0x2318) == "PLACE OF INTEREST SIGN"

    def test_control_character(self) -> None:
        assert rune_name(0x00) == "<control>"
        assert rune_name(0x9F) == "<control>"

    def test_unassigned_is_empty(self) -> None:
        assert rune_name(0x0378) == ""

    def test_private_use_is_empty(self) -> None:
        assert rune_name(0xE000) == ""


class TestCategoryPredicates:
    def test_major_classes_present(self) -> None:
        registry = category_predicates()
        for major in ("C", "L", "M", "N", "P", "S", "Z"):
            assert major in registry

    def test_unassigned_category_absent(self) -> None:
        assert "Cn" not in category_predicates()
        assert "Cn" not in GENERAL_CATEGORIES

    def test_every_general_category_present(self) -> None:
        registry = category_predicates()
        assert set(GENERAL_CATEGORIES) <= set(registry)
        assert len(registry) == len(GENERAL_CATEGORIES) + 7

    def test_major_other_excludes_unassigned(self) -> None:
        registry = category_predicates()
        assert registry["C"](0x00)
        assert registry["C"](0xE000)
        assert not registry["C"](0x0378)

    @pytest.mark.parametrize(
        ("value", "code"),
        [(0x41, "Lu"), (0x61, "Ll"), (0x301, "Mn"), (0x24, "Sc"), (0x28, "Ps"), (0x2028, "Zl")],
    )
    def test_two_letter_predicates(self, value: int, code: str) -> None:
        registry = category_predicates()
        assert registry[code](value)
        assert registry[code[0]](value)


class TestDisplayWidth:
    @pytest.mark.parametrize(
        ("value", "width"),
        [
            (0x41, 1),
            (0x2552, 1),
            (0x4E2D, 2),
            (0xFF21, 2),
            (0x00, 0),
            (0x07, 0),
            (0x85, 0),
            (0x301, 0),
            (0x200B, 0),
            (0x1160, 0),
            (0xAD, 1),
            (0xD800, 0),
            (0x110000, 0),
        ],
    )
    def test_width(self, value: int, width: int) -> None:
        assert display_width(value) == width


class TestDefaultLookups:
    def test_bundle(self) -> None:
        lookups = default_lookups()
        assert lookups.name(0x41) == "LATIN CAPITAL LETTER A"
        assert lookups.width(0x4E2D) == 2
        assert "Lu" in lookups.categories
