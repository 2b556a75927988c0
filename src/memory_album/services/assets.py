"""Binding uploaded photos to durable storage paths."""

import logging
import re
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID, uuid4

from memory_album.domain.errors import EmptyFile
from memory_album.domain.uploads import PhotoUpload

logger = logging.getLogger(__name__)

_EXTENSION = re.compile(r"^[a-z0-9]{1,10}$")


class BlobStore(Protocol):
    """Object storage keyed by path."""

    def put(self, path: str, content: bytes, content_type: str | None) -> None:
        """Store bytes at a new path; raise ``UploadFailed`` if it exists."""

    def public_address_of(self, path: str) -> str:
        """Return the public URL for a stored path."""


@dataclass
class AssetUploader:
    """Uploads photos under random, non-overwriting paths."""

    blob_store: BlobStore

    def bind(self, scope_id: UUID, upload: PhotoUpload | None) -> str:
        """Store a photo under the scope namespace and return its address."""
        if upload is None or not upload.filename or not upload.content:
            raise EmptyFile("A photo is required")
        path = build_asset_path(scope_id, upload.filename)
        try:
            self.blob_store.put(path, upload.content, upload.content_type)
        except Exception:
            logger.exception("Photo upload failed", extra={"path": path})
            raise
        return self.blob_store.public_address_of(path)


def build_asset_path(scope_id: UUID, filename: str) -> str:
    """Return ``albums/<scope>/<random>[.<ext>]`` for an upload."""
    name = uuid4().hex
    extension = _extension_of(filename)
    if extension:
        name = f"{name}.{extension}"
    return f"albums/{scope_id}/{name}"


def _extension_of(filename: str) -> str | None:
    if "." not in filename:
        return None
    extension = filename.rsplit(".", maxsplit=1)[1].lower()
    return extension if _EXTENSION.match(extension) else None
