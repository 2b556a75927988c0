"""Pydantic models for the album HTTP API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from memory_album.domain.albums import Album, Memory
from memory_album.domain.share import ShareArtifact
from memory_album.services.memories import photo_display_url


class AlbumCreateRequest(BaseModel):
    """Payload for creating an album."""

    title: str
    slug: str | None = None


class AlbumUpdateRequest(BaseModel):
    """Partial album update; omitted fields stay unchanged."""

    title: str | None = None
    slug: str | None = None


class ShareResponse(BaseModel):
    """Public link and copy text for an album."""

    public_url: str
    message: str


class AlbumResponse(BaseModel):
    """Album as returned to owners and visitors."""

    id: UUID
    title: str
    slug: str
    is_public: bool
    created_at: datetime
    public_url: str

    @classmethod
    def build(cls, album: Album, share: ShareArtifact) -> "AlbumResponse":
        return cls(
            id=album.id,
            title=album.title,
            slug=album.slug,
            is_public=album.is_public,
            created_at=album.created_at,
            public_url=share.public_url,
        )


class MemoryResponse(BaseModel):
    """Memory with a cache-busted photo address."""

    id: UUID
    album_id: UUID
    title: str
    place: str | None = None
    time: str | None = None
    description: str | None = None
    photo_url: str
    display_url: str
    created_at: datetime

    @classmethod
    def build(cls, memory: Memory) -> "MemoryResponse":
        return cls(
            id=memory.id,
            album_id=memory.album_id,
            title=memory.title,
            place=memory.place,
            time=memory.time,
            description=memory.description,
            photo_url=memory.photo_url,
            display_url=photo_display_url(memory),
            created_at=memory.created_at,
        )


class AlbumDetailResponse(BaseModel):
    """Album with its memories, newest first."""

    album: AlbumResponse
    memories: list[MemoryResponse] = Field(default_factory=list)
    share: ShareResponse | None = None
