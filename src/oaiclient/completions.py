"""Completions endpoint (``POST /completions``).

Usage:
    from oaiclient import completions, CompletionModels

    result = await (
        completions.build(CompletionModels.TEXT_DAVINCI_003)
        .prompt("Ice cream or cookies?")
        .max_tokens(32)
        .complete()
    )
    if result.is_ok():
        print(result.value.text)
    else:
        print(f"Error: {result.error}")
"""

from __future__ import annotations

from typing import Any

from .catalog import CompletionModel, model_name
from .params import ParameterBuilder
from .requester import Requester
from .result import Result
from .types import Completion


class CompletionParameters(ParameterBuilder):
    """Optional fields of a completion request."""

    def __init__(self, model: CompletionModel, requester: Requester | None = None) -> None:
        super().__init__(requester)
        self._model = model_name(model)

    def _required(self) -> list[tuple[str, Any]]:
        return [("model", self._model)]

    def prompt(self, prompt: str) -> CompletionParameters:
        """The prompt to generate completions for."""
        return self._set("prompt", prompt)

    def prompts(self, prompts: list[str] | list[int] | list[list[int]]) -> CompletionParameters:
        """Several prompts, a token array, or an array of token arrays.

        Shares the ``prompt`` field with ``prompt()``.
        """
        return self._set("prompt", list(prompts))

    def suffix(self, suffix: str) -> CompletionParameters:
        """Text that comes after the inserted completion."""
        return self._set("suffix", suffix)

    def temperature(self, temperature: float) -> CompletionParameters:
        """Sampling temperature; higher values make output more random.

        Alter this or ``top_p``, not both.
        """
        return self._set("temperature", temperature)

    def top_p(self, top_p: float) -> CompletionParameters:
        """Nucleus sampling: only tokens within the ``top_p`` probability mass."""
        return self._set("top_p", top_p)

    def n(self, n: int) -> CompletionParameters:
        """How many completions to generate for each prompt.

        Each one consumes tokens; keep ``max_tokens`` and ``stop`` reasonable.
        """
        return self._set("n", n)

    def logprobs(self, logprobs: int) -> CompletionParameters:
        """Return log probabilities of the ``logprobs`` most likely tokens (max 5)."""
        return self._set("logprobs", logprobs)

    def echo(self, echo: bool) -> CompletionParameters:
        """Echo back the prompt in addition to the completion."""
        return self._set("echo", echo)

    def stop(self, stop: str) -> CompletionParameters:
        """A sequence where generation stops; not included in the output."""
        return self._set("stop", stop)

    def stops(self, stops: list[str]) -> CompletionParameters:
        """Up to 4 stop sequences. Shares the ``stop`` field with ``stop()``."""
        return self._set("stop", list(stops))

    def user(self, user: str) -> CompletionParameters:
        """Identifier of the end user, used by the service for abuse monitoring."""
        return self._set("user", user)

    def max_tokens(self, max_tokens: int) -> CompletionParameters:
        """Maximum number of tokens to generate.

        Prompt tokens plus ``max_tokens`` must fit the model's context length.
        """
        return self._set("max_tokens", max_tokens)

    def presence_penalty(self, penalty: float) -> CompletionParameters:
        """-2.0 to 2.0; positive values favour tokens not yet in the text."""
        return self._set("presence_penalty", penalty)

    def frequency_penalty(self, penalty: float) -> CompletionParameters:
        """-2.0 to 2.0; positive values penalise tokens by how often they appeared."""
        return self._set("frequency_penalty", penalty)

    def best_of(self, best_of: int) -> CompletionParameters:
        """Generate ``best_of`` candidates server-side and return the best.

        Must be greater than ``n`` when both are set.
        """
        return self._set("best_of", best_of)

    def logit_bias(self, bias: dict[str | int, float]) -> CompletionParameters:
        """Map of token id to a bias from -100 to 100."""
        return self._set("logit_bias", {str(token): value for token, value in bias.items()})

    async def complete(self) -> Result[Completion, int]:
        """Submit the request. Consumes the builder."""
        body, requester = self._take()
        return await requester.completions(body, Completion)


def build(model: CompletionModel, *, requester: Requester | None = None) -> CompletionParameters:
    """Start a completion request for ``model``."""
    return CompletionParameters(model, requester)
