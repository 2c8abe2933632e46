"""Shared machinery for the per-endpoint parameter builders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Self

from .errors import BuilderConsumedError
from .requester import Requester


class ParameterBuilder(ABC):
    """Accumulates optional request fields in call order.

    Chained setters return the builder itself. A field set twice keeps the
    last value. Values are not range-checked; the service rejects bad ones.
    The terminal call consumes the builder, after which any further use
    raises ``BuilderConsumedError``.
    """

    def __init__(self, requester: Requester | None = None) -> None:
        self._query: list[tuple[str, Any]] = []
        self._requester = requester
        self._consumed = False

    @abstractmethod
    def _required(self) -> list[tuple[str, Any]]:
        """Mandatory fields, in wire order, placed before optional ones."""
        raise NotImplementedError

    def _check_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(type(self).__name__)

    def _set(self, key: str, value: Any) -> Self:
        self._check_open()
        self._query.append((key, value))
        return self

    @property
    def consumed(self) -> bool:
        return self._consumed

    def to_body(self) -> dict[str, Any]:
        """JSON body the terminal call would send. Does not consume."""
        self._check_open()
        body = dict(self._required())
        for key, value in self._query:
            body[key] = value
        return body

    def _take(self) -> tuple[dict[str, Any], Requester]:
        """Assemble the body and mark the builder as submitted."""
        body = self.to_body()
        self._consumed = True
        return body, self._requester or Requester()

    def __repr__(self) -> str:
        state = "submitted" if self._consumed else "open"
        fields = ", ".join(key for key, _ in self._query)
        return f"{type(self).__name__}({state}; {fields})"
