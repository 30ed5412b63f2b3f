"""Domain entity describing an item of recent activity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

ActivityKind = Literal["client", "task", "sale"]


@dataclass(frozen=True)
class Activity:
    """Display-oriented projection of a client, task or sale change."""

    id: str
    kind: ActivityKind
    title: str
    description: str
    timestamp: datetime
    link: str

    @property
    def key(self) -> str:
        """Compound key; ``id`` alone may repeat across kinds."""

        return f"{self.kind}:{self.id}:{self.timestamp.isoformat()}"


__all__ = ["Activity", "ActivityKind"]
