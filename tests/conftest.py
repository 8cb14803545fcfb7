"""Pytest session bootstrap for this repository.

Responsibilities:
- Ensure the repository root (containing `wikipedia_tools`) is importable
- Keep environment-driven settings deterministic under tests
- Provide fake transports so no test reaches the network
"""

import os
import sys
from typing import Any, Dict, List, Mapping, Optional

import pytest

HERE = os.path.dirname(__file__)
ROOT = os.path.abspath(os.path.join(HERE, '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


class FakeResponse:
    def __init__(self, status: int = 200, body: str = "", read_error: Optional[Exception] = None) -> None:
        self.status = status
        self._body = body
        self._read_error = read_error

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    async def text(self) -> str:
        if self._read_error is not None:
            raise self._read_error
        return self._body


class FakeTransport:
    """Records every fetch and replays a fixed response (or raises)."""

    def __init__(self, status: int = 200, body: str = "", error: Optional[Exception] = None, read_error: Optional[Exception] = None) -> None:
        self.status = status
        self.body = body
        self.error = error
        self.read_error = read_error
        self.calls: List[Dict[str, Any]] = []

    async def fetch(self, url: str, *, method: str = "GET", headers: Optional[Mapping[str, str]] = None):
        self.calls.append({"url": url, "method": method, "headers": dict(headers or {})})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.status, self.body, self.read_error)


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch):
    # Fail fast and never sleep if something builds a real transport
    monkeypatch.setenv("WIKIPEDIA_MAX_RETRIES", "0")
    monkeypatch.delenv("WIKIPEDIA_BASE_URL", raising=False)
    from wikipedia_tools.infrastructure.config import settings as settings_module
    settings_module.reload_settings()
    yield
    settings_module.reload_settings()


@pytest.fixture
def make_transport():
    def _make(status: int = 200, body: str = "", **kwargs: Any) -> FakeTransport:
        return FakeTransport(status=status, body=body, **kwargs)
    return _make
