"""Memory store: photo-backed records scoped to an album."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol
from urllib.parse import quote
from uuid import UUID

from memory_album.domain.errors import NotFound, ValidationFailed

if TYPE_CHECKING:
    from memory_album.domain.albums import Memory, MemoryDraft
    from memory_album.domain.sessions import OwnerSession
    from memory_album.domain.uploads import PhotoUpload
    from memory_album.services.albums import AlbumService
    from memory_album.services.assets import AssetUploader

logger = logging.getLogger(__name__)


class MemoryRepository(Protocol):
    """Persistence interface for memories."""

    def create_memory(self, album_id: UUID, payload: dict[str, object]) -> Memory:
        """Insert a memory and return it."""

    def get_memory(self, memory_id: UUID) -> Memory | None:
        """Return a memory by id, if present."""

    def list_by_album(self, album_id: UUID) -> list[Memory]:
        """Return an album's memories, newest first."""

    def delete_memory(self, memory_id: UUID) -> None:
        """Delete a memory row."""

    def delete_by_album(self, album_id: UUID) -> None:
        """Delete every memory of an album."""


@dataclass
class MemoryService:
    """Application service for memory lifecycle actions."""

    repository: MemoryRepository
    album_service: AlbumService
    uploader: AssetUploader

    def create(
        self,
        session: OwnerSession | None,
        album_id: UUID,
        draft: MemoryDraft,
        upload: PhotoUpload | None,
    ) -> Memory:
        """Upload the photo, then record the memory.

        A failed upload leaves no record behind; a failed insert leaves at
        most an unreferenced blob.
        """
        album = self.album_service.get_owned(session, album_id)
        title = (draft.title or "").strip()
        if not title:
            raise ValidationFailed("Title is required")
        photo_url = self.uploader.bind(album.id, upload)
        memory = self.repository.create_memory(
            album.id,
            {
                "title": title,
                "place": _clean_optional(draft.place),
                "time": _clean_optional(draft.time),
                "description": _clean_optional(draft.description),
                "photo_url": photo_url,
            },
        )
        logger.info(
            "Memory created",
            extra={"album_id": str(album.id), "memory_id": str(memory.id)},
        )
        return memory

    def list_by_album(self, album_id: UUID) -> list[Memory]:
        """Return an album's memories, newest first."""
        return self.repository.list_by_album(album_id)

    def delete(
        self, session: OwnerSession | None, album_id: UUID, memory_id: UUID
    ) -> None:
        """Delete one memory of an owned album."""
        album = self.album_service.get_owned(session, album_id)
        memory = self.repository.get_memory(memory_id)
        if memory is None or memory.album_id != album.id:
            raise NotFound("Memory not found")
        self.repository.delete_memory(memory.id)


def photo_display_url(memory: Memory) -> str:
    """Return the photo address with a creation-time cache-busting token."""
    separator = "&" if "?" in memory.photo_url else "?"
    token = quote(memory.created_at.isoformat(), safe="")
    return f"{memory.photo_url}{separator}t={token}"


def _clean_optional(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip()
