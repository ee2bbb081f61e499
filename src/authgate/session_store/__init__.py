"""Session Store - In-memory holder of session validity."""

from authgate.session_store.exceptions import (
    SessionIdGenerationError,
    SessionStoreError,
)
from authgate.session_store.models import (
    DEFAULT_TTL_SECONDS,
    Session,
    generate_session_id,
)
from authgate.session_store.store import SessionStore
from authgate.session_store.sweeper import SessionSweeper

__all__ = [
    "DEFAULT_TTL_SECONDS",
    "Session",
    "SessionIdGenerationError",
    "SessionStore",
    "SessionStoreError",
    "SessionSweeper",
    "generate_session_id",
]
