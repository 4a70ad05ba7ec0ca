"""Health check endpoint."""

from fastapi import APIRouter, Request
from datetime import datetime, timezone

from .. import __version__

router = APIRouter()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/")
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": _now(),
        "service": "image-relay",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Ready once the dispatcher has been built."""
    dispatcher = getattr(request.app.state, "dispatcher", None)
    return {
        "ready": dispatcher is not None,
        "services": dispatcher.service_names if dispatcher else [],
        "timestamp": _now(),
    }
