"""Shared pytest fixtures.

Fixtures available to all tests:
  • settings         : AppSettings isolated from .env files, storage in tmp_path
  • memory_store     : fresh MemoryKeyValueStore per test
  • token_store      : TokenStore over memory_store
  • mock_client      : factory: httpx.AsyncClient over a MockTransport handler

Every test runs with `.env` loading disabled and no AUTH_BOOTSTRAP_* variables,
so a developer's user config never leaks in.
"""

from __future__ import annotations

import os
from collections.abc import Callable

import httpx
import pytest

from adapters.storage import MemoryKeyValueStore
from core.config import AppSettings
from core.services.token_store import TokenStore

BASE_URL = "https://api.example.test/"


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch):
    monkeypatch.setitem(AppSettings.model_config, "env_file", None)
    for name in list(os.environ):
        if name.upper().startswith("AUTH_BOOTSTRAP_"):
            monkeypatch.delenv(name)


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_base_url=BASE_URL,
        storage_path=tmp_path / "storage.json",
    )


@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def token_store(memory_store: MemoryKeyValueStore) -> TokenStore:
    return TokenStore(memory_store)


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, *, json_body=None, content: bytes | None = None):
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json_body)


@pytest.fixture
def mock_client() -> Callable[[RecordingHandler], httpx.AsyncClient]:
    def _build(handler: RecordingHandler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _build
