"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import pytest_asyncio
import respx

from webservice.fetch import HttpxWebService

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

BASE_URL = "https://example.com"


class RecordingLogger:
    """Error logger that keeps every message for assertions."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def log_error_message(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture()
def error_log() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture()
def mock_api():
    """Activate respx mock for the example.com base URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as rsps:
        yield rsps


@pytest_asyncio.fixture()
async def service(mock_api: respx.MockRouter, error_log: RecordingLogger) -> AsyncIterator[HttpxWebService]:  # noqa: ARG001
    """HttpxWebService wired to the mocked transport."""
    async with HttpxWebService(logger=error_log) as svc:
        yield svc


@pytest.fixture()
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp path and clear config env vars."""
    config_file = tmp_path / "config.toml"
    monkeypatch.setattr("webservice.config.CONFIG_FILE", config_file)
    monkeypatch.delenv("WEBSERVICE_SCHEME", raising=False)
    monkeypatch.delenv("WEBSERVICE_LOG_LEVEL", raising=False)
    return config_file
