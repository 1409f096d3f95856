"""Reference to an account ("total") held by a transaction."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountRef:
    """Account identity plus display name as embedded in transactions."""

    id: int
    name: str | None = None

    def __str__(self) -> str:
        return self.name or f"#{self.id}"
