"""Data models for Session Store."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from authgate.session_store.exceptions import SessionIdGenerationError

DEFAULT_TTL_SECONDS = 3600

# 16 random bytes = 128 bits of entropy, rendered as 32 hex chars.
SESSION_ID_BYTES = 16


def generate_session_id() -> str:
    """Generate a new unguessable session id.

    Returns:
        A 32-character lowercase hex string from the OS CSPRNG.

    Raises:
        SessionIdGenerationError: If the entropy source is unavailable.
    """
    try:
        return secrets.token_hex(SESSION_ID_BYTES)
    except (OSError, NotImplementedError) as e:
        raise SessionIdGenerationError(f"Entropy source unavailable: {e}") from e


@dataclass(frozen=True)
class Session:
    """A server-held session record.

    Attributes:
        id: Opaque session identifier handed to the client.
        expires_at: Absolute expiry time in seconds since the epoch.
    """

    id: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Whether the session has expired at time ``now``."""
        return now >= self.expires_at

    def __repr__(self) -> str:
        return f"<Session(id={self.id[:8]!r}..., expires_at={self.expires_at!r})>"
