"""Supabase Storage implementation for photo blobs."""

from dataclasses import dataclass

import httpx
from supabase import Client, StorageException

from memory_album.domain.errors import UploadFailed
from memory_album.services.assets import BlobStore


@dataclass
class SupabaseBlobStore(BlobStore):
    """Stores photos in a Supabase Storage bucket."""

    client: Client
    bucket: str

    def put(self, path: str, content: bytes, content_type: str | None) -> None:
        """Upload bytes without overwriting an existing object."""
        file_options = {"upsert": "false"}
        if content_type:
            file_options["content-type"] = content_type
        try:
            self.client.storage.from_(self.bucket).upload(
                path, content, file_options=file_options
            )
        except StorageException as exc:
            raise UploadFailed(str(exc)) from exc
        except httpx.HTTPError as exc:
            raise UploadFailed(f"Storage unreachable: {exc}") from exc

    def public_address_of(self, path: str) -> str:
        """Return the bucket's public URL for a path."""
        return self.client.storage.from_(self.bucket).get_public_url(path)
