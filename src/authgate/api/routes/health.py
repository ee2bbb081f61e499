"""Health check endpoint."""

from fastapi import APIRouter

from authgate import __version__
from authgate.api.dependencies import SessionStoreDep
from authgate.api.models import APIResponse, HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=APIResponse[HealthResponse])
def health(store: SessionStoreDep) -> APIResponse[HealthResponse]:
    """Report liveness and the number of live sessions."""
    return APIResponse(
        data=HealthResponse(version=__version__, active_sessions=store.active_count)
    )
