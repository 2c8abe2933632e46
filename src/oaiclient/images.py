"""Images endpoints (``POST /images/{generations,edits,variations}``).

Usage:
    result = await images.build().generate("A cat wearing a hat").size("512x512").done()

    result = await images.edit(image, "Add a red balloon").mask(mask).n(2).done()

    result = await images.variation(image).done()
    if result.is_ok():
        for item in result.value.data:
            print(item.url)
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from .params import ParameterBuilder
from .requester import ImageRequestType, Requester
from .result import Result
from .types import Images


class _ImageParameters(ParameterBuilder):
    """Fields common to the three image operations."""

    request_type: ClassVar[ImageRequestType]

    def n(self, n: int) -> Self:
        """Number of images to generate (1-10)."""
        return self._set("n", n)

    def size(self, size: str) -> Self:
        """One of ``256x256``, ``512x512`` or ``1024x1024``."""
        return self._set("size", size)

    def response_format(self, response_format: str) -> Self:
        """``url`` or ``b64_json``."""
        return self._set("response_format", response_format)

    def user(self, user: str) -> Self:
        return self._set("user", user)

    async def done(self) -> Result[Images, int]:
        """Submit the request. Consumes the builder."""
        body, requester = self._take()
        return await requester.images(self.request_type, body, Images)


class GenerateParameters(_ImageParameters):
    """Create images from a prompt."""

    request_type = ImageRequestType.GENERATIONS

    def __init__(self, prompt: str, requester: Requester | None = None) -> None:
        super().__init__(requester)
        self._prompt = prompt

    def _required(self) -> list[tuple[str, Any]]:
        return [("prompt", self._prompt)]


class EditParameters(_ImageParameters):
    """Edit an existing image following a prompt."""

    request_type = ImageRequestType.EDITS

    def __init__(self, image: str, prompt: str, requester: Requester | None = None) -> None:
        super().__init__(requester)
        self._image = image
        self._prompt = prompt

    def _required(self) -> list[tuple[str, Any]]:
        return [("prompt", self._prompt), ("image", self._image)]

    def mask(self, mask: str) -> EditParameters:
        """Image whose transparent areas mark where ``image`` should change."""
        return self._set("mask", mask)


class VariationParameters(_ImageParameters):
    """Produce variations of an existing image."""

    request_type = ImageRequestType.VARIATIONS

    def __init__(self, image: str, requester: Requester | None = None) -> None:
        super().__init__(requester)
        self._image = image

    def _required(self) -> list[tuple[str, Any]]:
        return [("image", self._image)]


class ImageRequest:
    """Entry point selecting which image operation to build."""

    def __init__(self, requester: Requester | None = None) -> None:
        self._requester = requester

    def generate(self, prompt: str) -> GenerateParameters:
        return GenerateParameters(prompt, self._requester)

    def edits(self, image: str, prompt: str) -> EditParameters:
        return EditParameters(image, prompt, self._requester)

    def variation(self, image: str) -> VariationParameters:
        return VariationParameters(image, self._requester)


def build(*, requester: Requester | None = None) -> ImageRequest:
    return ImageRequest(requester)


def generate(prompt: str, *, requester: Requester | None = None) -> GenerateParameters:
    return GenerateParameters(prompt, requester)


def edit(image: str, prompt: str, *, requester: Requester | None = None) -> EditParameters:
    return EditParameters(image, prompt, requester)


def variation(image: str, *, requester: Requester | None = None) -> VariationParameters:
    return VariationParameters(image, requester)
