"""Health check endpoints."""

from datetime import datetime

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Basic health check."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "submissions": len(request.app.state.submission_store),
    }
