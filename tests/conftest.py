"""Shared pytest fixtures for retry executor tests."""

from __future__ import annotations

import pytest


class RecordingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict]] = []

    def _record(self, level: str, event: str, **kwargs) -> None:
        self.events.append((level, event, kwargs))

    def debug(self, event: str, **kwargs) -> None:
        self._record("debug", event, **kwargs)

    def info(self, event: str, **kwargs) -> None:
        self._record("info", event, **kwargs)

    def warning(self, event: str, **kwargs) -> None:
        self._record("warning", event, **kwargs)

    def error(self, event: str, **kwargs) -> None:
        self._record("error", event, **kwargs)

    def names(self) -> list[str]:
        return [event for _, event, _ in self.events]


@pytest.fixture
def sleeps(monkeypatch):
    """Replace the executor's sleep with a recorder that returns immediately."""

    recorded: list[float] = []

    async def _record_sleep(delay):
        recorded.append(delay)

    monkeypatch.setattr("retryfn.executor.asyncio.sleep", _record_sleep)
    return recorded


@pytest.fixture
def recording_logger():
    return RecordingLogger()
