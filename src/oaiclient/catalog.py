"""Known model identifiers per endpoint family.

Each catalog is a closed enum plus an escape hatch, ``CustomModel``, that
carries any other identifier verbatim. Nothing here is checked against the
live service; an unknown name only fails when the request is made.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True, slots=True)
class CustomModel:
    """A model identifier outside the built-in catalogs."""

    name: str

    def __str__(self) -> str:
        return self.name


class CompletionModels(str, Enum):
    """Models served by the completions endpoint."""

    TEXT_DAVINCI_003 = "text-davinci-003"
    TEXT_DAVINCI_002 = "text-davinci-002"
    TEXT_DAVINCI_001 = "text-davinci-001"
    TEXT_CURIE_001 = "text-curie-001"
    TEXT_BABBAGE_001 = "text-babbage-001"
    TEXT_ADA_001 = "text-ada-001"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def from_str(name: str) -> CustomModel:
        """Wrap an arbitrary identifier, e.g. a fine-tuned model."""
        return CustomModel(name)


class EditModels(str, Enum):
    """Models served by the edits endpoint."""

    TEXT_DAVINCI_EDIT_001 = "text-davinci-edit-001"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def from_str(name: str) -> CustomModel:
        """Wrap an arbitrary identifier."""
        return CustomModel(name)


CompletionModel = Union[CompletionModels, CustomModel, str]
EditModel = Union[EditModels, CustomModel, str]


def model_name(model: CompletionModels | EditModels | CustomModel | str) -> str:
    """Canonical wire-level ``model`` value for a catalog entry."""
    if isinstance(model, Enum):
        return model.value
    if isinstance(model, CustomModel):
        return model.name
    return str(model)
