"""Owner-facing album management endpoints."""

from uuid import UUID

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    Request,
    Response,
    UploadFile,
    status,
)

from memory_album.api.deps import get_container, require_owner, share_for
from memory_album.api.schemas import (
    AlbumCreateRequest,
    AlbumDetailResponse,
    AlbumResponse,
    AlbumUpdateRequest,
    MemoryResponse,
    ShareResponse,
)
from memory_album.containers import AppContainer
from memory_album.domain.albums import MemoryDraft
from memory_album.domain.sessions import OwnerSession
from memory_album.domain.share import ShareArtifact
from memory_album.domain.uploads import PhotoUpload
from memory_album.services.share import render_qr_png, share_message

router = APIRouter(prefix="/albums", tags=["albums"])


@router.get("")
async def list_albums(
    request: Request, session: OwnerSession = Depends(require_owner)
) -> dict[str, list[AlbumResponse]]:
    """Return the owner's albums, newest first."""
    container = get_container(request)
    albums = container.album_service.list_albums(session)
    return {
        "albums": [
            AlbumResponse.build(album, share_for(container, album.slug))
            for album in albums
        ]
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_album(
    body: AlbumCreateRequest,
    request: Request,
    session: OwnerSession = Depends(require_owner),
) -> AlbumResponse:
    """Create a public album."""
    container = get_container(request)
    album = container.album_service.create(session, body.title, body.slug)
    return AlbumResponse.build(album, share_for(container, album.slug))


@router.get("/{album_id}")
async def album_detail(
    album_id: UUID, request: Request, session: OwnerSession = Depends(require_owner)
) -> AlbumDetailResponse:
    """Return the management view of an album."""
    container = get_container(request)
    album = container.album_service.get_owned(session, album_id)
    memories = container.memory_service.list_by_album(album.id)
    share = share_for(container, album.slug)
    return AlbumDetailResponse(
        album=AlbumResponse.build(album, share),
        memories=[MemoryResponse.build(memory) for memory in memories],
        share=_share_response(container, share),
    )


@router.patch("/{album_id}")
async def update_album(
    album_id: UUID,
    body: AlbumUpdateRequest,
    request: Request,
    session: OwnerSession = Depends(require_owner),
) -> AlbumResponse:
    """Rename an album or change its slug."""
    container = get_container(request)
    album = container.album_service.update(
        session, album_id, title=body.title, slug_seed=body.slug
    )
    return AlbumResponse.build(album, share_for(container, album.slug))


@router.delete("/{album_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_album(
    album_id: UUID, request: Request, session: OwnerSession = Depends(require_owner)
) -> Response:
    """Delete an album together with its memories."""
    container = get_container(request)
    container.album_service.delete(session, album_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{album_id}/share")
async def album_share(
    album_id: UUID, request: Request, session: OwnerSession = Depends(require_owner)
) -> ShareResponse:
    """Return the current public link and its copy text."""
    container = get_container(request)
    album = container.album_service.get_owned(session, album_id)
    return _share_response(container, share_for(container, album.slug))


@router.get("/{album_id}/qr.png")
async def album_qr(
    album_id: UUID, request: Request, session: OwnerSession = Depends(require_owner)
) -> Response:
    """Return the album's QR code."""
    container = get_container(request)
    album = container.album_service.get_owned(session, album_id)
    png = render_qr_png(share_for(container, album.slug))
    return Response(content=png, media_type="image/png")


@router.post("/{album_id}/memories", status_code=status.HTTP_201_CREATED)
async def create_memory(  # noqa: PLR0913
    album_id: UUID,
    request: Request,
    title: str = Form(...),
    place: str | None = Form(None),
    time: str | None = Form(None),
    description: str | None = Form(None),
    photo: UploadFile | None = File(None),
    session: OwnerSession = Depends(require_owner),
) -> MemoryResponse:
    """Upload a photo and add a memory to the album."""
    container = get_container(request)
    upload = None
    if photo is not None:
        upload = PhotoUpload(
            filename=photo.filename,
            content=await photo.read(),
            content_type=photo.content_type,
        )
    memory = container.memory_service.create(
        session,
        album_id,
        MemoryDraft(title=title, place=place, time=time, description=description),
        upload,
    )
    return MemoryResponse.build(memory)


@router.delete(
    "/{album_id}/memories/{memory_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_memory(
    album_id: UUID,
    memory_id: UUID,
    request: Request,
    session: OwnerSession = Depends(require_owner),
) -> Response:
    """Delete one memory."""
    container = get_container(request)
    container.memory_service.delete(session, album_id, memory_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _share_response(container: AppContainer, share: ShareArtifact) -> ShareResponse:
    return ShareResponse(
        public_url=share.public_url,
        message=share_message(share, container.settings.share_message_template),
    )
