"""Response records decoded from the API's JSON bodies."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    """Read-only record; unknown JSON fields are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


# === Shared ===


class Usage(_Record):
    """Token usage statistics."""

    prompt_tokens: int
    completion_tokens: int = 0
    total_tokens: int


# === Completions ===


class CompletionChoice(_Record):
    text: str
    index: int
    logprobs: dict[str, Any] | None = None
    finish_reason: str | None = None


class Completion(_Record):
    """Response from ``POST /completions``."""

    id: str
    object: str
    created: int
    model: str
    choices: list[CompletionChoice]
    usage: Usage

    @property
    def text(self) -> str:
        """Text of the first choice."""
        if self.choices:
            return self.choices[0].text
        return ""


# === Edits ===


class EditChoice(_Record):
    text: str
    index: int


class Edit(_Record):
    """Response from ``POST /edits``."""

    object: str
    created: int
    choices: list[EditChoice]
    usage: Usage

    @property
    def text(self) -> str:
        """Text of the first choice."""
        if self.choices:
            return self.choices[0].text
        return ""


# === Images ===


class ImageURL(_Record):
    """One generated image; ``b64_json`` is set instead of ``url`` when
    ``response_format("b64_json")`` was requested."""

    url: str | None = None
    b64_json: str | None = None


class Images(_Record):
    """Response from the ``/images/*`` endpoints."""

    created: int
    data: list[ImageURL]


# === Models ===


class ModelPermissions(_Record):
    id: str
    object: str
    created: int
    allow_create_engine: bool
    allow_sampling: bool
    allow_logprobs: bool
    allow_search_indices: bool
    allow_view: bool
    allow_fine_tuning: bool
    organization: str
    group: str | None = None
    is_blocking: bool


class Model(_Record):
    """A catalog entry from ``GET /models``."""

    id: str
    object: str | None = None
    owned_by: str | None = None
    permission: list[ModelPermissions] | None = None


class ModelList(_Record):
    """Envelope of ``GET /models``."""

    data: list[Model]
