"""Pytest fixtures for all test modules."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from oaiclient import ClientConfig, Requester


class MockAPI:
    """Stand-in for the remote service behind an httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {}
        self.raw: bytes | None = None
        self.error: Exception | None = None

    def respond(self, status_code: int = 200, payload: Any = None, raw: bytes | None = None) -> None:
        """Set the response returned for every following request."""
        self.status_code = status_code
        self.payload = payload if payload is not None else {}
        self.raw = raw

    def fail(self, error: Exception) -> None:
        """Raise ``error`` instead of answering (simulates transport failure)."""
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.last_request.content)


@pytest.fixture
def config() -> ClientConfig:
    """Configuration with a dummy key."""
    return ClientConfig(api_key="sk-test-key")


@pytest.fixture
def api() -> MockAPI:
    return MockAPI()


@pytest.fixture
def requester(config: ClientConfig, api: MockAPI) -> Requester:
    """Requester wired to the mock API."""
    return Requester(config, transport=httpx.MockTransport(api.handler))


@pytest.fixture
def completion_payload() -> dict[str, Any]:
    """A well-formed completion response body."""
    return {
        "id": "cmpl-uqkvlQyYK7bGYrRHQ0eXlWi7",
        "object": "text_completion",
        "created": 1589478378,
        "model": "text-davinci-003",
        "choices": [
            {
                "text": "\n\nPong",
                "index": 0,
                "logprobs": None,
                "finish_reason": "length",
            }
        ],
        "usage": {"prompt_tokens": 1, "completion_tokens": 5, "total_tokens": 6},
    }


@pytest.fixture
def edit_payload() -> dict[str, Any]:
    """A well-formed edit response body."""
    return {
        "object": "edit",
        "created": 1589478378,
        "choices": [{"text": "What day of the week is it?", "index": 0}],
        "usage": {"prompt_tokens": 25, "completion_tokens": 32, "total_tokens": 57},
    }


@pytest.fixture
def images_payload() -> dict[str, Any]:
    """A well-formed images response body."""
    return {
        "created": 1589478378,
        "data": [{"url": "https://example.com/a.png"}, {"url": "https://example.com/b.png"}],
    }


@pytest.fixture
def model_payload() -> dict[str, Any]:
    """A single model entry, including permissions."""
    return {
        "id": "text-davinci-003",
        "object": "model",
        "owned_by": "openai-internal",
        "permission": [
            {
                "id": "modelperm-abc",
                "object": "model_permission",
                "created": 1669066355,
                "allow_create_engine": False,
                "allow_sampling": True,
                "allow_logprobs": True,
                "allow_search_indices": False,
                "allow_view": True,
                "allow_fine_tuning": False,
                "organization": "*",
                "group": None,
                "is_blocking": False,
            }
        ],
    }


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> Any:
    """Remove client variables from the environment for the test.

    Each variable is set then deleted so monkeypatch restores the original
    state afterwards, including values loaded by python-dotenv. The working
    directory moves to an empty tmp dir so no stray .env file is found.
    """
    for name in ("OPENAI_API_KEY", "OPENAI_BASE_URL", "OPENAI_TIMEOUT"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
