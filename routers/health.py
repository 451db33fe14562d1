# routers/health.py

from fastapi import APIRouter

from core.policy_config import get_policy_config

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/app
# Simple API health check for uptime monitors
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    """
    Lightweight health check for uptime monitors.
    """
    return {
        "service": "Access Policy API",
        "status": "ok",
    }


# -----------------------------------------------------
# GET /health/policy
# Confirms the permission table compiled
# -----------------------------------------------------
@router.get("/policy", summary="Permission policy health check")
async def health_policy():
    """
    Reports which policy table is loaded and how big it is.
    A table that failed to compile never gets this far: startup aborts.
    """
    config = get_policy_config()
    return {
        "service": "Permission policy",
        "status": "ok",
        "version": config.version,
        "resources": len(config.resources()),
        "entries": len(config),
    }
