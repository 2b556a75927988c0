"""Domain models for photo uploads."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PhotoUpload:
    """An in-memory photo file awaiting storage."""

    filename: str | None
    content: bytes
    content_type: str | None = None
