"""Domain models for share artifacts and public resolution."""

from dataclasses import dataclass, field
from enum import StrEnum

from memory_album.domain.albums import Album, Memory


@dataclass(frozen=True)
class ShareArtifact:
    """Public link for an album and the payload encoded in its QR code."""

    public_url: str
    qr_payload: bytes


class ResolutionState(StrEnum):
    """Terminal states of a public slug resolution."""

    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class PublicResolution:
    """Outcome of resolving a public slug."""

    state: ResolutionState
    album: Album | None = None
    memories: list[Memory] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.state is ResolutionState.FOUND
