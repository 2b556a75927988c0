"""Anonymous, read-only resolution of public album links."""

from dataclasses import dataclass

from memory_album.domain.errors import NotFound
from memory_album.domain.share import PublicResolution, ResolutionState
from memory_album.services.albums import AlbumService
from memory_album.services.memories import MemoryService


@dataclass
class PublicReader:
    """Resolves slug -> album -> memories for visitors."""

    album_service: AlbumService
    memory_service: MemoryService

    def resolve(self, slug: str) -> PublicResolution:
        """Resolve a slug; missing, deleted and private albums look the same."""
        try:
            album = self.album_service.find_by_public_slug(slug)
        except NotFound:
            return PublicResolution(state=ResolutionState.NOT_FOUND)
        memories = self.memory_service.list_by_album(album.id)
        return PublicResolution(
            state=ResolutionState.FOUND, album=album, memories=memories
        )
