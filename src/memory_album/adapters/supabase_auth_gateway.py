"""Supabase Auth implementation of the session oracle."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from memory_album.domain.sessions import OwnerSession
from memory_album.services.session_gate import (
    SessionCallback,
    SessionOracle,
    Unsubscribe,
)

logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthGateway(SessionOracle):
    """Reads sessions from Supabase Auth."""

    client: Client

    def current_session(self) -> OwnerSession | None:
        """Return the client's active session, if any."""
        session = self.client.auth.get_session()
        if session is None:
            return None
        return _to_owner_session(session.user)

    def on_session_change(self, callback: SessionCallback) -> Unsubscribe:
        """Forward auth state changes to the callback."""

        def _listener(_event, session) -> None:  # type: ignore[no-untyped-def]
            callback(_to_owner_session(session.user) if session else None)

        subscription = self.client.auth.on_auth_state_change(_listener)
        return subscription.unsubscribe

    def session_for_token(self, access_token: str) -> OwnerSession | None:
        """Validate an access token against Supabase Auth."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError:
            logger.info("Rejected access token")
            return None
        if response is None or response.user is None:
            return None
        return _to_owner_session(response.user)


def _to_owner_session(user) -> OwnerSession:  # type: ignore[no-untyped-def]
    return OwnerSession(user_id=UUID(str(user.id)), email=getattr(user, "email", None))
