"""Error taxonomy for album and memory operations."""


class MemoryAlbumError(Exception):
    """Base class for all domain errors."""


class ValidationFailed(MemoryAlbumError):
    """Raised when user-supplied input is empty or invalid."""


class EmptyFile(ValidationFailed):
    """Raised when an upload has no filename or no content."""


class SlugConflict(MemoryAlbumError):
    """Raised when another album already holds the requested slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Slug already taken: {slug}")
        self.slug = slug


class NotAuthenticated(MemoryAlbumError):
    """Raised when a mutating operation runs without an owner session."""


class NotFound(MemoryAlbumError):
    """Raised for missing, foreign or non-public records."""


class UploadFailed(MemoryAlbumError):
    """Raised when a photo could not be bound to storage."""


class StoreError(MemoryAlbumError):
    """Raised when the record store rejects an operation."""
