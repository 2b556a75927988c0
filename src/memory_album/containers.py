"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from memory_album.adapters.supabase_album_repository import SupabaseAlbumRepository
from memory_album.adapters.supabase_auth_gateway import SupabaseAuthGateway
from memory_album.adapters.supabase_blob_store import SupabaseBlobStore
from memory_album.adapters.supabase_memory_repository import (
    SupabaseMemoryRepository,
)
from memory_album.config import Settings
from memory_album.services.albums import AlbumService
from memory_album.services.assets import AssetUploader
from memory_album.services.memories import MemoryService
from memory_album.services.public_reader import PublicReader
from memory_album.services.session_gate import SessionGate


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_gate: SessionGate
    album_service: AlbumService
    memory_service: MemoryService
    public_reader: PublicReader

    def close_resources(self) -> None:
        """Release long-lived subscriptions."""
        self.session_gate.close()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    album_repository = SupabaseAlbumRepository(supabase_client)
    memory_repository = SupabaseMemoryRepository(supabase_client)
    blob_store = SupabaseBlobStore(
        supabase_client, bucket=resolved_settings.storage_bucket
    )
    session_gate = SessionGate(SupabaseAuthGateway(supabase_client))
    album_service = AlbumService(
        repository=album_repository, memory_repository=memory_repository
    )
    memory_service = MemoryService(
        repository=memory_repository,
        album_service=album_service,
        uploader=AssetUploader(blob_store),
    )
    public_reader = PublicReader(
        album_service=album_service, memory_service=memory_service
    )
    return AppContainer(
        settings=resolved_settings,
        session_gate=session_gate,
        album_service=album_service,
        memory_service=memory_service,
        public_reader=public_reader,
    )
