"""Session gate answering whether an authenticated owner is present."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Protocol

from memory_album.domain.errors import NotAuthenticated
from memory_album.domain.sessions import OwnerSession

logger = logging.getLogger(__name__)

SessionCallback = Callable[[OwnerSession | None], None]
Unsubscribe = Callable[[], None]


class SessionOracle(Protocol):
    """Identity provider capabilities consumed by the gate."""

    def current_session(self) -> OwnerSession | None:
        """Return the active session, if any."""

    def on_session_change(self, callback: SessionCallback) -> Unsubscribe:
        """Register a callback for login/logout and return its unsubscriber."""

    def session_for_token(self, access_token: str) -> OwnerSession | None:
        """Resolve a bearer access token into a session, if valid."""


def require_session(session: OwnerSession | None) -> OwnerSession:
    """Return the session or refuse the operation."""
    if session is None:
        raise NotAuthenticated("An authenticated owner is required")
    return session


@dataclass
class SessionWatch:
    """Live view of the session for the lifetime of a subscription."""

    session: OwnerSession | None
    active: bool = True

    def _update(self, session: OwnerSession | None) -> None:
        if self.active:
            self.session = session

    def require(self) -> OwnerSession:
        """Return the current session, refusing once the watch has ended."""
        if not self.active:
            raise NotAuthenticated("Session watch is no longer active")
        return require_session(self.session)


@dataclass
class SessionGate:
    """Process-wide access point to the owner session."""

    oracle: SessionOracle
    _unsubscribers: list[Unsubscribe] = field(default_factory=list)

    def current(self) -> OwnerSession | None:
        """Return the current session, if any."""
        return self.oracle.current_session()

    def require_owner(self) -> OwnerSession:
        """Return the current session or raise ``NotAuthenticated``."""
        return require_session(self.current())

    def from_token(self, access_token: str | None) -> OwnerSession | None:
        """Resolve a request bearer token into a session."""
        if not access_token:
            return None
        return self.oracle.session_for_token(access_token)

    @contextmanager
    def watch(self) -> Iterator[SessionWatch]:
        """Track session changes until the block exits."""
        view = SessionWatch(session=self.current())
        unsubscribe = self.oracle.on_session_change(view._update)
        self._unsubscribers.append(unsubscribe)
        try:
            yield view
        finally:
            view.active = False
            if unsubscribe in self._unsubscribers:
                self._unsubscribers.remove(unsubscribe)
                unsubscribe()

    def close(self) -> None:
        """Release any subscriptions still held by open watches."""
        while self._unsubscribers:
            unsubscribe = self._unsubscribers.pop()
            unsubscribe()
        logger.info("Session gate closed")
