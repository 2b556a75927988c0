"""Album store: owner-scoped CRUD and the public slug lookup."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from memory_album.domain.albums import Album
from memory_album.domain.errors import NotFound, SlugConflict, ValidationFailed
from memory_album.domain.sessions import OwnerSession
from memory_album.services.memories import MemoryRepository
from memory_album.services.session_gate import require_session
from memory_album.services.slugs import normalize_slug

logger = logging.getLogger(__name__)


class AlbumRepository(Protocol):
    """Persistence interface for albums.

    ``create_album`` and ``update_album`` raise ``SlugConflict`` when the
    store's unique constraint on ``slug`` rejects the write.
    """

    def create_album(
        self, owner_id: UUID, title: str, slug: str, is_public: bool
    ) -> Album:
        """Insert an album and return it."""

    def get_album(self, album_id: UUID) -> Album | None:
        """Return an album by id, if present."""

    def get_by_slug(self, slug: str) -> Album | None:
        """Return the album holding a slug, if any."""

    def list_albums(self, owner_id: UUID | None) -> list[Album]:
        """Return albums newest first, optionally for a single owner."""

    def update_album(self, album_id: UUID, payload: dict[str, object]) -> Album:
        """Update an album and return it."""

    def delete_album(self, album_id: UUID) -> None:
        """Delete an album row."""


@dataclass
class AlbumService:
    """Application service for album lifecycle actions."""

    repository: AlbumRepository
    memory_repository: MemoryRepository

    def create(
        self,
        session: OwnerSession | None,
        title: str,
        slug_seed: str | None = None,
    ) -> Album:
        """Create a public album for the session owner."""
        owner = require_session(session)
        clean_title = _clean_title(title)
        slug = normalize_slug(slug_seed or clean_title)
        self._ensure_slug_free(slug)
        album = self.repository.create_album(
            owner_id=owner.user_id,
            title=clean_title,
            slug=slug,
            is_public=True,
        )
        logger.info(
            "Album created", extra={"album_id": str(album.id), "slug": album.slug}
        )
        return album

    def list_albums(self, session: OwnerSession | None) -> list[Album]:
        """Return the owner's albums, newest first."""
        owner = require_session(session)
        return self.repository.list_albums(owner.user_id)

    def get_owned(self, session: OwnerSession | None, album_id: UUID) -> Album:
        """Return an album the session owner may manage."""
        owner = require_session(session)
        album = self.repository.get_album(album_id)
        if album is None or album.owner_id != owner.user_id:
            raise NotFound("Album not found")
        return album

    def update(
        self,
        session: OwnerSession | None,
        album_id: UUID,
        title: str | None = None,
        slug_seed: str | None = None,
    ) -> Album:
        """Apply a partial title/slug update."""
        album = self.get_owned(session, album_id)
        payload: dict[str, object] = {}
        if title is not None:
            payload["title"] = _clean_title(title)
        if slug_seed is not None:
            slug = normalize_slug(slug_seed)
            if slug != album.slug:
                self._ensure_slug_free(slug)
            payload["slug"] = slug
        if not payload:
            return album
        return self.repository.update_album(album_id, payload)

    def delete(self, session: OwnerSession | None, album_id: UUID) -> None:
        """Delete an album after all of its memories are gone."""
        album = self.get_owned(session, album_id)
        self.memory_repository.delete_by_album(album.id)
        self.repository.delete_album(album.id)
        logger.info("Album deleted", extra={"album_id": str(album.id)})

    def find_by_public_slug(self, slug: str) -> Album:
        """Resolve a public slug without any session."""
        album = self.repository.get_by_slug(slug)
        if album is None or not album.is_public:
            raise NotFound("Album not found or private")
        return album

    def _ensure_slug_free(self, slug: str) -> None:
        # Fast path only; the store's unique constraint is authoritative.
        if self.repository.get_by_slug(slug) is not None:
            raise SlugConflict(slug)


def _clean_title(title: str | None) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValidationFailed("Title is required")
    return cleaned
