"""Models endpoint (``GET /models``, ``GET /models/{id}``)."""

from __future__ import annotations

import builtins

from .requester import Requester
from .result import Result
from .types import Model, ModelList


async def list(*, requester: Requester | None = None) -> Result[builtins.list[Model], int]:  # noqa: A001
    """List the models available to the API key."""
    result = await (requester or Requester()).models(ModelList)
    return result.map(lambda envelope: envelope.data)


async def get(model_name: str, *, requester: Requester | None = None) -> Result[Model, int]:
    """Fetch one model by identifier, e.g. ``"text-davinci-003"``."""
    return await (requester or Requester()).models(Model, model_name)
