"""Shared pytest fixtures and test records for envbind tests."""

from __future__ import annotations

import pytest

# Every variable name the test records read from the process environment.
TEST_VARS = ("A", "B", "C", "D", "E", "F", "G", "ENVBIND_VERBOSE", "ENVBIND_LOG_JSON")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Unset every test variable in the real process environment.

    Tests that bind against ``os.environ`` use this so leftovers from the
    developer's shell never leak in.
    """
    for name in TEST_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def scalar_env() -> dict[str, str]:
    """One valid literal for each scalar test field ``A``..``G``."""
    return {
        "A": "true",
        "B": "xxx",
        "C": "16",
        "D": "yyy",
        "E": "64",
        "F": "32",
        "G": "18446744073709551615",
    }
