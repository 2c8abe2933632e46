"""Edits endpoint (``POST /edits``).

Usage:
    result = await (
        edits.build(EditModels.TEXT_DAVINCI_EDIT_001, "Fix the spelling mistakes")
        .input("What day of the wek is it?")
        .edit()
    )
"""

from __future__ import annotations

from typing import Any

from .catalog import EditModel, model_name
from .params import ParameterBuilder
from .requester import Requester
from .result import Result
from .types import Edit


class EditParameters(ParameterBuilder):
    """Optional fields of an edit request; model and instruction are fixed."""

    def __init__(
        self,
        model: EditModel,
        instruction: str,
        requester: Requester | None = None,
    ) -> None:
        super().__init__(requester)
        self._model = model_name(model)
        self._instruction = instruction

    def _required(self) -> list[tuple[str, Any]]:
        return [("model", self._model), ("instruction", self._instruction)]

    def input(self, text: str) -> EditParameters:
        """The text to edit. Defaults to "" on the service side."""
        return self._set("input", text)

    def n(self, n: int) -> EditParameters:
        """How many edits to generate."""
        return self._set("n", n)

    def temperature(self, temperature: float) -> EditParameters:
        return self._set("temperature", temperature)

    def top_p(self, top_p: float) -> EditParameters:
        return self._set("top_p", top_p)

    async def edit(self) -> Result[Edit, int]:
        """Submit the request. Consumes the builder."""
        body, requester = self._take()
        return await requester.edits(body, Edit)


def build(
    model: EditModel,
    instruction: str,
    *,
    requester: Requester | None = None,
) -> EditParameters:
    """Start an edit request telling ``model`` how to change the input."""
    return EditParameters(model, instruction, requester)
