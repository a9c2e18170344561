#!/usr/bin/env python3
"""Example: Quickstart — runes

Minimal working example: resolve a code point, render a few as text
and JSON, and collect characters into a code-point table.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install runes
"""
from __future__ import annotations

import runes


def main() -> None:
    print(f"runes version: {runes.__version__}")

    # Step 1: Resolve one code point
    info = runes.resolve(0x1F970)
    print(f"U+{info.rune:04X}: {info.name}")
    print(f"  categories={info.categories} utf8={info.utf8.hex(' ')} "
          f"utf16={[f'{unit:04X}' for unit in info.utf16]}")

    # Step 2: Render as aligned text
    print()
    print(runes.render([0x41, 0x2318, 0x4E2D, 0xD800]), end="")

    # Step 3: Render as JSON
    print()
    print(runes.render([0xE9], output_format="json"), end="")

    # Step 4: Collect characters into a table
    table = runes.codepoint_set("hello, world")
    table.set_range(ord("0"), ord("9"))
    table.unset_range(ord("3"), ord("6"))
    print(f"\n{len(table)} code point(s): {table}")


if __name__ == "__main__":
    main()
