"""Request dispatcher: one HTTP round trip per call.

Status handling:
    - transport failure (DNS, refused connection, TLS, timeout, bad URL) -> Err(400)
    - any status other than 200 -> Err(status), body left unparsed
    - 200 with a body that does not decode into the expected record -> Err(400)
    - 200 with a well-formed body -> Ok(record)

No retries; a failed call is final.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .config import ClientConfig
from .errors import DECODE_ERROR, TRANSPORT_ERROR
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class ImageRequestType(str, Enum):
    """Sub-path under ``/images`` selecting the operation."""

    GENERATIONS = "generations"
    EDITS = "edits"
    VARIATIONS = "variations"


class Requester:
    """Performs authenticated requests against the API.

    Without an explicit ``config`` the credential is re-read from the
    environment on every call, so a missing key surfaces as
    ``ConfigurationError`` at submission time.

    Usage:
        requester = Requester(ClientConfig(api_key="sk-..."))
        result = await requester.submit("GET", "/models", ModelList)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def resolve_config(self) -> ClientConfig:
        """Config for the next call; raises ConfigurationError if unavailable."""
        return self._config or ClientConfig.from_env()

    def _client(self, config: ClientConfig) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {}
        if config.timeout is not None:
            kwargs["timeout"] = config.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def submit(
        self,
        method: str,
        path: str,
        response_type: type[R],
        body: dict[str, Any] | None = None,
    ) -> Result[R, int]:
        """Send one request and decode a 200 body into ``response_type``.

        Raises:
            ConfigurationError: If no API key can be resolved.
        """
        config = self.resolve_config()
        url = config.url(path)
        headers = config.headers(json_body=body is not None)

        logger.debug("%s %s", method, url)
        try:
            async with self._client(config) as client:
                response = await client.request(method, url, headers=headers, json=body)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            return Err(TRANSPORT_ERROR)

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if response.status_code != httpx.codes.OK:
            return Err(response.status_code)

        try:
            return Ok(response_type.model_validate_json(response.content))
        except ValidationError as e:
            logger.warning(
                "Could not decode %s response from %s: %s",
                response_type.__name__,
                url,
                e,
            )
            return Err(DECODE_ERROR)

    # === Endpoints ===

    async def completions(self, body: dict[str, Any], response_type: type[R]) -> Result[R, int]:
        return await self.submit("POST", "/completions", response_type, body)

    async def edits(self, body: dict[str, Any], response_type: type[R]) -> Result[R, int]:
        return await self.submit("POST", "/edits", response_type, body)

    async def images(
        self,
        request_type: ImageRequestType,
        body: dict[str, Any],
        response_type: type[R],
    ) -> Result[R, int]:
        return await self.submit("POST", f"/images/{request_type.value}", response_type, body)

    async def models(self, response_type: type[R], model_name: str | None = None) -> Result[R, int]:
        path = "/models" if model_name is None else f"/models/{quote(model_name, safe='')}"
        return await self.submit("GET", path, response_type)
