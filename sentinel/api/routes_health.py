from fastapi import APIRouter

from sentinel import __version__
from sentinel.core.config import get_settings

router = APIRouter()

@router.get("/ready")
def readiness_probe():
    return {"status": "ready", "version": __version__, "llm_configured": bool(get_settings().LLM_API_KEY)}

@router.get("/live")
def liveness_probe():
    return {"status": "alive"}
