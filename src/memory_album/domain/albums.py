"""Domain models for albums and their memories."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Album:
    """An owner-curated collection of memories, shared by slug."""

    id: UUID
    owner_id: UUID
    title: str
    slug: str
    is_public: bool
    created_at: datetime


@dataclass(frozen=True)
class Memory:
    """A single photo-backed record belonging to one album."""

    id: UUID
    album_id: UUID
    title: str
    place: str | None
    time: str | None
    description: str | None
    photo_url: str
    created_at: datetime


@dataclass(frozen=True)
class MemoryDraft:
    """Owner-entered memory fields before the photo is bound."""

    title: str
    place: str | None = None
    time: str | None = None
    description: str | None = None
