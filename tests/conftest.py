from __future__ import annotations

import httpx
import pytest
import respx

import relay.config as config_mod
from relay.connectors import API_BASE

COMPLETIONS_URL = f"{API_BASE}/chat/completions"


@pytest.fixture
def store():
    """In-memory host configuration with only the required key set."""
    return {"api_key": "sk-test-key"}


@pytest.fixture
def get(store):
    return config_mod.lookup(store)


@pytest.fixture
def client():
    with httpx.Client() as c:
        yield c


@pytest.fixture
def api():
    """respx router with the chat-completions route registered (no response yet)."""
    with respx.mock(assert_all_called=False) as router:
        router.post(COMPLETIONS_URL, name="completions")
        yield router


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    monkeypatch.setenv("RELAY_CONFIG", str(path))
    return path


def chat_response(message: dict) -> dict:
    return {
        "id": "chatcmpl-1",
        "model": "gpt-4o",
        "choices": [{"index": 0, "message": message, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
    }
