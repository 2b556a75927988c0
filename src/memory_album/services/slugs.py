"""Slug normalization for public album links."""

import re
import unicodedata

from memory_album.domain.errors import ValidationFailed

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def normalize_slug(raw: str | None) -> str:
    """Normalize free text into a URL-safe slug.

    Lower-cases the text, strips diacritics, collapses every run of
    characters outside ``[a-z0-9]`` into a single hyphen and trims hyphens
    from both ends. Raises ``ValidationFailed`` when nothing is left.
    """
    decomposed = unicodedata.normalize("NFD", (raw or "").lower())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    slug = _NON_SLUG_RUN.sub("-", stripped).strip("-")
    if not slug:
        raise ValidationFailed("Slug must contain at least one letter or digit")
    return slug
