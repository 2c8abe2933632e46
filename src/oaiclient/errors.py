"""Error taxonomy for the client.

Only two conditions raise: a missing credential and reuse of a submitted
builder. Everything that happens on the wire comes back as ``Err(status)``.
"""

from __future__ import annotations

import httpx

# Exit code for "configuration error" (BSD sysexits.h EX_CONFIG)
EX_CONFIG = 78

# Connection, DNS and TLS failures never produce a status of their own.
TRANSPORT_ERROR: int = httpx.codes.BAD_REQUEST

# A 200 body that is not the expected shape is reported as a bad request.
DECODE_ERROR: int = httpx.codes.BAD_REQUEST


class ConfigurationError(Exception):
    """The client cannot be configured (e.g. OPENAI_API_KEY is not set)."""

    def __init__(self, message: str, variable: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.variable = variable

    def __str__(self) -> str:
        return self.message


class BuilderConsumedError(RuntimeError):
    """A parameter builder was used after it had been submitted."""

    def __init__(self, builder: str) -> None:
        super().__init__(f"{builder} was already submitted; build a new request")
        self.builder = builder
