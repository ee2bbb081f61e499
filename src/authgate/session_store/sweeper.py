"""Background sweeper that evicts expired sessions."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from authgate.session_store.store import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL_SECONDS = 600


class SessionSweeper:
    """Periodically prunes expired sessions from a SessionStore.

    Lookups already ignore expired sessions, so the sweeper only bounds
    memory held by sessions that are never looked up again.
    """

    def __init__(
        self,
        store: SessionStore,
        interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS,
    ) -> None:
        """Initialize the sweeper.

        Args:
            store: Store to prune.
            interval_seconds: Seconds between sweeps. Must be positive.
        """
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")
        self._store = store
        self._interval = interval_seconds
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """Whether the sweeper thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the sweeper thread. Does nothing if already running."""
        if self.running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run,
            name="authgate-session-sweeper",
            daemon=True,
        )
        self._thread.start()
        logger.info("Session sweeper started (interval=%ss)", self._interval)

    def stop(self, timeout: float | None = 5.0) -> None:
        """Signal the sweeper to stop and wait for it to exit."""
        if self._thread is None:
            return

        self._stop_event.set()
        self._thread.join(timeout=timeout)
        self._thread = None
        logger.info("Session sweeper stopped")

    def sweep_once(self) -> int:
        """Run a single sweep.

        Returns:
            Number of sessions removed.
        """
        return self._store.prune_expired()

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            try:
                self.sweep_once()
            except Exception as e:
                logger.exception("Session sweep failed: %s", e)
