from fastapi import APIRouter, HTTPException, Request
from datetime import datetime, timezone

router = APIRouter()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()

@router.get("/health")
async def health_check(request: Request):
    """
    Basic health check endpoint for production monitoring
    """
    state = request.app.state
    health_status = {
        "status": "healthy",
        "timestamp": _now(),
        "version": request.app.version,
        "checks": {}
    }

    if getattr(state, "team_store", None) is not None:
        health_status["checks"]["team_store"] = {
            "status": "healthy",
            "users": len(state.team_store)
        }
    else:
        health_status["checks"]["team_store"] = {"status": "unhealthy", "error": "not initialized"}
        health_status["status"] = "degraded"

    client = getattr(state, "pokemon_client", None)
    health_status["checks"]["pokemon_client"] = {
        "status": "healthy" if client is not None else "unhealthy",
        "note": "Upstream PokeAPI is not contacted by health checks"
    }
    if client is None:
        health_status["status"] = "degraded"

    return health_status

@router.get("/health/ready")
async def readiness_check(request: Request):
    """
    Readiness probe: the service must be wired before traffic is accepted
    """
    if getattr(request.app.state, "pokemon_service", None) is None:
        raise HTTPException(
            status_code=503,
            detail={"status": "not_ready", "timestamp": _now()}
        )
    return {"status": "ready", "timestamp": _now()}

@router.get("/health/live")
async def liveness_check():
    """
    Liveness probe endpoint
    """
    return {"status": "alive", "timestamp": _now()}
