"""HTTP API for authgate."""

from authgate.api.app import app, create_app
from authgate.api.models import APIResponse, HealthResponse

__all__ = [
    "APIResponse",
    "HealthResponse",
    "app",
    "create_app",
]
