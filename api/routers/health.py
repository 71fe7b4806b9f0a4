"""
Health check router.

Liveness endpoints for monitoring and load balancers. /api/health mirrors
/health for clients that only talk to the /api prefix.
"""

from fastapi import APIRouter

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
@router.get("/api/health")
def health():
    """
    Simple liveness endpoint for the workout tracker.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}
