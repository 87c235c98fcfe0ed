from __future__ import annotations

import pytest
from pydantic import ValidationError

from retryfn.config import RetrySettings, get_settings
from retryfn.delay import FixedDelay
from retryfn.executor import RetryOptions


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_defaults():
    settings = RetrySettings()

    assert settings.max_attempts == 5
    assert settings.delay_seconds == 0.1
    assert settings.timeout_seconds is None
    assert settings.cancel_on_timeout is False


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("RETRY_MAX_ATTEMPTS", "3")
    monkeypatch.setenv("RETRY_DELAY_SECONDS", "0.5")
    monkeypatch.setenv("RETRY_TIMEOUT_SECONDS", "2")

    settings = get_settings()

    assert settings.max_attempts == 3
    assert settings.delay_seconds == 0.5
    assert settings.timeout_seconds == 2.0
    assert get_settings() is settings


def test_settings_reject_invalid_values(monkeypatch):
    monkeypatch.setenv("RETRY_MAX_ATTEMPTS", "0")

    with pytest.raises(ValidationError):
        RetrySettings()


def test_options_from_settings_with_overrides():
    settings = RetrySettings(max_attempts=2, delay_seconds=0.3, timeout_seconds=4)

    options = RetryOptions.from_settings(settings, max_attempts=7)

    assert options.max_attempts == 7
    assert options.delay == FixedDelay(0.3)
    assert options.timeout == 4
