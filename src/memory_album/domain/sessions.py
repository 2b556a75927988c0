"""Domain models for owner sessions."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class OwnerSession:
    """An authenticated principal as seen by the album services."""

    user_id: UUID
    email: str | None = None
