"""Shared test fixtures for the die_parser test suite.

Parsing is pure, so most tests need no fixture at all. Validation reads the
module-level settings object; ``table_settings`` lets a test change it for the
duration of that test only.
"""

from __future__ import annotations

import pytest

from die_parser.config import Settings, settings


@pytest.fixture
def table_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Yield the live settings object with every field restored after the test."""
    for name, value in settings.model_dump().items():
        monkeypatch.setattr(settings, name, value)
    return settings
