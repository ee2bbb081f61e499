"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from authgate.config import GatewayConfig
from authgate.session_store import DEFAULT_TTL_SECONDS, SessionStore

# Global SessionStore instance (initialized on app startup)
_session_store: SessionStore | None = None


def init_session_store(ttl_seconds: int = DEFAULT_TTL_SECONDS) -> SessionStore:
    """Initialize the global SessionStore instance."""
    global _session_store  # noqa: PLW0603
    _session_store = SessionStore(ttl_seconds=ttl_seconds)
    return _session_store


def close_session_store() -> None:
    """Drop the global SessionStore instance, discarding all sessions."""
    global _session_store  # noqa: PLW0603
    _session_store = None


def get_session_store() -> Generator[SessionStore, None, None]:
    """Dependency that provides the SessionStore instance."""
    if _session_store is None:
        raise RuntimeError("SessionStore not initialized. Call init_session_store() first.")
    yield _session_store


# Type alias for dependency injection
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]

# Global configuration (initialized on app startup)
_config: GatewayConfig | None = None


def init_config(config: GatewayConfig) -> GatewayConfig:
    """Initialize the global GatewayConfig instance."""
    global _config  # noqa: PLW0603
    _config = config
    return _config


def close_config() -> None:
    """Clear the global GatewayConfig instance."""
    global _config  # noqa: PLW0603
    _config = None


def get_config() -> Generator[GatewayConfig, None, None]:
    """Dependency that provides the GatewayConfig instance."""
    if _config is None:
        raise RuntimeError("Config not initialized. Call init_config() first.")
    yield _config


# Type alias for dependency injection
ConfigDep = Annotated[GatewayConfig, Depends(get_config)]
