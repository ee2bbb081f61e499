"""authgate - minimal session authentication gateway."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the installed authgate version."""
    return __version__
