"""SessionStore - Main API for Session Store operations."""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING, Any

from authgate.logging import fingerprint
from authgate.session_store.exceptions import SessionIdGenerationError
from authgate.session_store.models import (
    DEFAULT_TTL_SECONDS,
    Session,
    generate_session_id,
)

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Longest id the store will look up; anything longer cannot have been issued.
MAX_SESSION_ID_LENGTH = 256

# Re-draws allowed when a fresh id collides with a live one.
MAX_ISSUE_ATTEMPTS = 5


class SessionStore:
    """Main API for Session Store operations.

    Issues, verifies and revokes sessions held in a lock-guarded dict.
    Expired sessions are treated as absent on lookup and evicted lazily.
    """

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = generate_session_id,
    ) -> None:
        """Initialize an empty Session Store.

        Args:
            ttl_seconds: Lifetime of every issued session.
            clock: Returns the current time in seconds since the epoch.
            id_factory: Produces fresh session ids.
        """
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.Lock()
        self._sessions: dict[str, Session] = {}

    @property
    def ttl_seconds(self) -> int:
        """Lifetime of issued sessions in seconds."""
        return self._ttl_seconds

    def issue(self) -> str:
        """Issue a new session.

        The caller is responsible for having verified credentials.

        Returns:
            The new session id, valid until revoked or expired.

        Raises:
            SessionIdGenerationError: If no usable id could be generated.
        """
        for _ in range(MAX_ISSUE_ATTEMPTS):
            session_id = self._id_factory()
            with self._lock:
                if session_id in self._sessions:
                    continue
                session = Session(id=session_id, expires_at=self._clock() + self._ttl_seconds)
                self._sessions[session_id] = session
            logger.info("Issued session %s", fingerprint(session_id))
            return session_id

        raise SessionIdGenerationError(
            f"Could not generate a unique session id after {MAX_ISSUE_ATTEMPTS} attempts"
        )

    def verify(self, session_id: Any) -> bool:
        """Check whether a session id refers to a live session.

        Args:
            session_id: Untrusted client-supplied value.

        Returns:
            True iff the session exists and has not expired. Unknown,
            expired and malformed ids all return False.
        """
        if not _is_well_formed(session_id):
            return False

        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False
            if session.is_expired(self._clock()):
                del self._sessions[session_id]
                logger.debug("Evicted expired session %s", fingerprint(session_id))
                return False
            return True

    def revoke(self, session_id: Any) -> None:
        """Revoke a session. No-op if the id is unknown.

        Args:
            session_id: Untrusted client-supplied value.
        """
        if not _is_well_formed(session_id):
            return

        with self._lock:
            removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info("Revoked session %s", fingerprint(session_id))

    def prune_expired(self) -> int:
        """Remove all expired sessions.

        Returns:
            Number of sessions removed.
        """
        with self._lock:
            now = self._clock()
            expired = [sid for sid, s in self._sessions.items() if s.is_expired(now)]
            for sid in expired:
                del self._sessions[sid]
        if expired:
            logger.info("Pruned %d expired sessions", len(expired))
        return len(expired)

    @property
    def active_count(self) -> int:
        """Number of sessions that have not expired."""
        with self._lock:
            now = self._clock()
            return sum(1 for s in self._sessions.values() if not s.is_expired(now))

    def __len__(self) -> int:
        """Number of held entries, including expired ones not yet evicted."""
        with self._lock:
            return len(self._sessions)


def _is_well_formed(session_id: Any) -> bool:
    return isinstance(session_id, str) and 0 < len(session_id) <= MAX_SESSION_ID_LENGTH
