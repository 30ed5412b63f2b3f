"""Result wrapper returned by the entity providers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class EntitySnapshot(Generic[T]):
    """A possibly loading, possibly failed read of one entity collection."""

    items: list[T] | None
    loading: bool = False
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def items_or_empty(self) -> list[T]:
        return list(self.items) if self.items else []


__all__ = ["EntitySnapshot"]
