"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, Request

from memory_album.domain.errors import NotAuthenticated
from memory_album.domain.sessions import OwnerSession
from memory_album.domain.share import ShareArtifact
from memory_album.services.share import derive_share

if TYPE_CHECKING:
    from memory_album.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def require_owner(
    request: Request, authorization: str | None = Header(default=None)
) -> OwnerSession:
    """Resolve the bearer token into an owner session."""
    container = get_container(request)
    token = _bearer_token(authorization)
    session = container.session_gate.from_token(token)
    if session is None:
        raise NotAuthenticated("Sign in to manage albums")
    return session


def share_for(container: AppContainer, slug: str) -> ShareArtifact:
    """Derive the share artifact from the configured base location."""
    return derive_share(container.settings.public_base_url, slug)


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
