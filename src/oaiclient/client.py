"""Convenience client bundling one configuration with every endpoint."""

from __future__ import annotations

from pathlib import Path

import httpx

from . import completions, edits, images, models
from .catalog import CompletionModel, EditModel
from .config import ClientConfig
from .requester import Requester
from .result import Result
from .types import Model


class OAIClient:
    """Client for the OpenAI API.

    The config is resolved once and shared by every request started from
    this client. All terminal calls return Result values instead of raising.

    Usage:
        client = OAIClient()  # reads OPENAI_API_KEY (and .env)

        result = await client.completions("text-davinci-003").prompt("Ping").max_tokens(5).complete()
        if result.is_ok():
            print(result.value.text)
        else:
            print(f"HTTP {result.error}")
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        env_file: str | Path | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Explicit configuration. If not provided, built from the
                environment (raises ConfigurationError when the key is missing).
            env_file: ``.env`` file to load when ``config`` is not given.
            transport: Custom httpx transport (mocking, proxies, custom TLS).
        """
        self._config = config or ClientConfig.from_env(env_file)
        self._requester = Requester(self._config, transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def requester(self) -> Requester:
        return self._requester

    def completions(self, model: CompletionModel) -> completions.CompletionParameters:
        return completions.build(model, requester=self._requester)

    def edits(self, model: EditModel, instruction: str) -> edits.EditParameters:
        return edits.build(model, instruction, requester=self._requester)

    def images(self) -> images.ImageRequest:
        return images.build(requester=self._requester)

    async def list_models(self) -> Result[list[Model], int]:
        return await models.list(requester=self._requester)

    async def get_model(self, model_name: str) -> Result[Model, int]:
        return await models.get(model_name, requester=self._requester)

    def __repr__(self) -> str:
        return f"OAIClient(base_url={self._config.base_url!r})"
