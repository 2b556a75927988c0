"""Anonymous endpoints for shared albums."""

from fastapi import APIRouter, Request, Response

from memory_album.api.deps import get_container, share_for
from memory_album.api.schemas import (
    AlbumDetailResponse,
    AlbumResponse,
    MemoryResponse,
)
from memory_album.domain.errors import NotFound
from memory_album.domain.share import PublicResolution
from memory_album.services.share import render_qr_png

router = APIRouter(prefix="/public/albums", tags=["public"])


@router.get("/{slug}")
async def public_album(slug: str, request: Request) -> AlbumDetailResponse:
    """Resolve a shared album and its memories."""
    container = get_container(request)
    resolution = _resolve(request, slug)
    album = resolution.album
    return AlbumDetailResponse(
        album=AlbumResponse.build(album, share_for(container, album.slug)),
        memories=[MemoryResponse.build(memory) for memory in resolution.memories],
    )


@router.get("/{slug}/qr.png")
async def public_album_qr(slug: str, request: Request) -> Response:
    """Return the QR code of a shared album."""
    container = get_container(request)
    album = container.album_service.find_by_public_slug(slug)
    png = render_qr_png(share_for(container, album.slug))
    return Response(content=png, media_type="image/png")


def _resolve(request: Request, slug: str) -> PublicResolution:
    resolution = get_container(request).public_reader.resolve(slug)
    if not resolution.found or resolution.album is None:
        raise NotFound("Album not found or private")
    return resolution
