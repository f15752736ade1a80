# tests/conftest.py
"""
Root conftest.

Test Tiers (for CI/CD optimization):
=====================================
- tier1: Pure logic, no I/O (<5s)
         Run: pytest -m tier1
- tier2: Touches the filesystem or spins up threads
         Run: pytest -m "tier1 or tier2"

Markers are assigned in pytest_collection_modifyitems() from the test file
name, so individual modules do not need to declare them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
import yaml

from contractkit.messages import ENV_VAR, reset_message_catalog

# Files that read/write catalog files or use thread pools.
TIER2_PATTERNS = [
    "test_messages",
    "test_concurrency",
]


def pytest_collection_modifyitems(items):
    """Tag every test with its tier."""
    for item in items:
        fspath = str(item.fspath).replace("\\", "/")
        if any(pattern in fspath for pattern in TIER2_PATTERNS):
            item.add_marker(pytest.mark.tier2)
        else:
            item.add_marker(pytest.mark.tier1)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_message_catalog(monkeypatch):
    """Every test starts from the packaged defaults with no override file."""
    monkeypatch.delenv(ENV_VAR, raising=False)
    reset_message_catalog()
    yield
    reset_message_catalog()


@pytest.fixture
def write_catalog(tmp_path) -> Callable[..., Path]:
    """Factory writing a catalog override file and returning its path."""

    def _write(data=None, *, raw: str | None = None, name: str = "messages.yaml") -> Path:
        path = tmp_path / name
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write
