"""Supabase implementation for memory persistence."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import httpx
from supabase import Client, PostgrestAPIError

from memory_album.domain.albums import Memory
from memory_album.domain.errors import StoreError
from memory_album.services.memories import MemoryRepository


@dataclass
class SupabaseMemoryRepository(MemoryRepository):
    """Supabase-backed repository for the ``memories`` table."""

    client: Client

    def create_memory(self, album_id: UUID, payload: dict[str, object]) -> Memory:
        """Insert a memory and return it."""
        response = _run(
            self.client.table("memories").insert(
                {"album_id": str(album_id), **payload}
            )
        )
        if not response.data:
            raise StoreError("Failed to create memory")
        return _parse_memory(response.data[0])

    def get_memory(self, memory_id: UUID) -> Memory | None:
        """Return a memory by id, if present."""
        response = _run(
            self.client.table("memories")
            .select("*")
            .eq("id", str(memory_id))
            .limit(1)
        )
        if not response.data:
            return None
        return _parse_memory(response.data[0])

    def list_by_album(self, album_id: UUID) -> list[Memory]:
        """Return an album's memories, newest first."""
        response = _run(
            self.client.table("memories")
            .select("*")
            .eq("album_id", str(album_id))
            .order("created_at", desc=True)
        )
        return [_parse_memory(row) for row in response.data or []]

    def delete_memory(self, memory_id: UUID) -> None:
        """Delete a memory row."""
        _run(self.client.table("memories").delete().eq("id", str(memory_id)))

    def delete_by_album(self, album_id: UUID) -> None:
        """Delete every memory of an album."""
        _run(self.client.table("memories").delete().eq("album_id", str(album_id)))


def _run(query):  # type: ignore[no-untyped-def]
    try:
        return query.execute()
    except PostgrestAPIError as exc:
        raise StoreError(exc.message or str(exc)) from exc
    except httpx.HTTPError as exc:
        raise StoreError(f"Record store unreachable: {exc}") from exc


def _optional_text(value: object) -> str | None:
    return str(value) if value is not None else None


def _parse_memory(row: dict[str, object]) -> Memory:
    """Parse a memory row into a domain model."""
    return Memory(
        id=UUID(str(row["id"])),
        album_id=UUID(str(row["album_id"])),
        title=str(row.get("title", "")),
        place=_optional_text(row.get("place")),
        time=_optional_text(row.get("time")),
        description=_optional_text(row.get("description")),
        photo_url=str(row.get("photo_url", "")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
