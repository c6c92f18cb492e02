from __future__ import annotations

import pytest

from schemafacets import settings


@pytest.fixture(autouse=True)
def active_settings(monkeypatch):
    given_settings = settings.Settings(culture="en_US", max_resolve_depth=32)
    monkeypatch.setattr(settings, "_settings", given_settings)
    return given_settings
