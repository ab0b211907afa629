"""Shared fixtures for slugcast tests."""

from pathlib import Path
from typing import Any

import pytest
from pydantic import SecretStr

from slugcast.config.schema import CloudflareCredentials
from slugcast.providers.base import ChatMessage, InferenceClient, TextCompleter
from slugcast.store.base import QueryStore, Row
from slugcast.utils.errors import ProviderError


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config at a temp dir and hide real credentials."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("SLUGCAST_CONFIG_DIR", str(config_dir))
    for var in (
        "CLOUDFLARE_ACCOUNT_ID",
        "CLOUDFLARE_DATABASE_ID",
        "CLOUDFLARE_API_TOKEN",
        "ANTHROPIC_API_KEY",
    ):
        monkeypatch.delenv(var, raising=False)
    return config_dir


@pytest.fixture
def credentials() -> CloudflareCredentials:
    """A complete set of Cloudflare credentials."""
    return CloudflareCredentials(
        account_id=SecretStr("acc123"),
        database_id=SecretStr("db456"),
        api_token=SecretStr("token-" + "x" * 34),
    )


@pytest.fixture
def sample_rows() -> list[Row]:
    """Two podcast rows, most recent first."""
    return [
        {
            "topic": "ai",
            "slug": "ai-guide",
            "url": "https://x.dev/ai-guide",
            "created_at": "2024-05-02T10:00:00.000Z",
        },
        {
            "topic": "cooking",
            "slug": "cooking-stories",
            "url": "https://x.dev/cooking-stories",
            "created_at": "2024-05-01T09:30:00.000Z",
        },
    ]


class StubStore(QueryStore):
    """Records queries and answers with canned rows or a failure."""

    def __init__(self, rows: list[Row] | None = None, error: Exception | None = None) -> None:
        self.rows = rows or []
        self.error = error
        self.calls: list[tuple[str, list[Any]]] = []

    async def query(self, sql: str, params: list[Any] | None = None) -> list[Row]:
        self.calls.append((sql, list(params or [])))
        if self.error is not None:
            raise self.error
        if sql.startswith("INSERT"):
            return []
        return self.rows


class StubCompleter(TextCompleter):
    """Returns queued responses; an Exception in the queue is raised."""

    provider_name = "stub"

    def __init__(self, *responses: str | Exception) -> None:
        self.responses = list(responses)
        self.prompts: list[str] = []

    async def complete(self, prompt: str, system: str | None = None) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0) if self.responses else ProviderError(
            "no more responses", provider="stub"
        )
        if isinstance(response, Exception):
            raise response
        return response


class StubInference(InferenceClient):
    def __init__(self, response: str | Exception) -> None:
        self.response = response
        self.messages: list[list[ChatMessage]] = []

    async def infer(self, messages: list[ChatMessage]) -> str:
        self.messages.append(messages)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def make_store() -> type[StubStore]:
    """StubStore class; call with rows= or error=."""
    return StubStore


@pytest.fixture
def make_completer() -> type[StubCompleter]:
    """StubCompleter class; call with queued responses."""
    return StubCompleter


@pytest.fixture
def make_inference() -> type[StubInference]:
    """StubInference class; call with a response or an exception."""
    return StubInference
