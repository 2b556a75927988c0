"""Supabase implementation for album persistence."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import httpx
from supabase import Client, PostgrestAPIError

from memory_album.domain.albums import Album
from memory_album.domain.errors import SlugConflict, StoreError
from memory_album.services.albums import AlbumRepository

_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseAlbumRepository(AlbumRepository):
    """Supabase-backed repository for the ``albums`` table."""

    client: Client

    def create_album(
        self, owner_id: UUID, title: str, slug: str, is_public: bool
    ) -> Album:
        """Insert an album and return it."""
        try:
            response = (
                self.client.table("albums")
                .insert(
                    {
                        "owner_id": str(owner_id),
                        "title": title,
                        "slug": slug,
                        "is_public": is_public,
                    }
                )
                .execute()
            )
        except PostgrestAPIError as exc:
            raise _translate(exc, slug) from exc
        except httpx.HTTPError as exc:
            raise StoreError(f"Record store unreachable: {exc}") from exc
        if not response.data:
            raise StoreError("Failed to create album")
        return _parse_album(response.data[0])

    def get_album(self, album_id: UUID) -> Album | None:
        """Return an album by id, if present."""
        response = _run(
            self.client.table("albums")
            .select("*")
            .eq("id", str(album_id))
            .limit(1)
        )
        if not response.data:
            return None
        return _parse_album(response.data[0])

    def get_by_slug(self, slug: str) -> Album | None:
        """Return the album holding a slug, if any."""
        response = _run(
            self.client.table("albums").select("*").eq("slug", slug).limit(1)
        )
        if not response.data:
            return None
        return _parse_album(response.data[0])

    def list_albums(self, owner_id: UUID | None) -> list[Album]:
        """Return albums newest first, optionally for a single owner."""
        query = self.client.table("albums").select("*")
        if owner_id is not None:
            query = query.eq("owner_id", str(owner_id))
        response = _run(query.order("created_at", desc=True))
        return [_parse_album(row) for row in response.data or []]

    def update_album(self, album_id: UUID, payload: dict[str, object]) -> Album:
        """Update an album and return it."""
        try:
            response = (
                self.client.table("albums")
                .update(payload)
                .eq("id", str(album_id))
                .execute()
            )
        except PostgrestAPIError as exc:
            raise _translate(exc, str(payload.get("slug", ""))) from exc
        except httpx.HTTPError as exc:
            raise StoreError(f"Record store unreachable: {exc}") from exc
        if not response.data:
            raise StoreError("Failed to update album")
        return _parse_album(response.data[0])

    def delete_album(self, album_id: UUID) -> None:
        """Delete an album row."""
        _run(self.client.table("albums").delete().eq("id", str(album_id)))


def _run(query):  # type: ignore[no-untyped-def]
    try:
        return query.execute()
    except PostgrestAPIError as exc:
        raise StoreError(exc.message or str(exc)) from exc
    except httpx.HTTPError as exc:
        raise StoreError(f"Record store unreachable: {exc}") from exc


def _translate(exc: PostgrestAPIError, slug: str) -> Exception:
    if exc.code == _UNIQUE_VIOLATION:
        return SlugConflict(slug)
    return StoreError(exc.message or str(exc))


def _parse_album(row: dict[str, object]) -> Album:
    """Parse an album row into a domain model."""
    return Album(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["owner_id"])),
        title=str(row.get("title", "")),
        slug=str(row.get("slug", "")),
        is_public=bool(row.get("is_public", True)),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
