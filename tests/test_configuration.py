"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from marina.configuration import MarinaSettings


def test_defaults_match_reference_marina() -> None:
    settings = MarinaSettings(_env_file=None)

    assert settings.max_boats == 120
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARINA_MAX_BOATS", "200")
    monkeypatch.setenv("MARINA_LOG_LEVEL", "debug")

    settings = MarinaSettings(_env_file=None)

    assert settings.max_boats == 200
    assert settings.log_level == "DEBUG"


def test_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARINA_MAX_BOATS", "0")

    with pytest.raises(ValidationError):
        MarinaSettings(_env_file=None)

    monkeypatch.delenv("MARINA_MAX_BOATS")
    monkeypatch.setenv("MARINA_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        MarinaSettings(_env_file=None)
