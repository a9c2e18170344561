"""Integration tests.

Integration tests drive the command line end to end against the
interpreter's real Unicode database. They are kept in a separate
directory so they can be excluded from the fast unit-test run with
``pytest tests/unit/``.
"""
from __future__ import annotations
