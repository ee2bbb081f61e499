"""Custom exceptions for Session Store."""


class SessionStoreError(Exception):
    """Base exception for Session Store errors."""


class SessionIdGenerationError(SessionStoreError):
    """The entropy source could not produce a session id.

    Unrecoverable: callers surface it as a server error and do not retry.
    """
