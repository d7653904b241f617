from fastapi import APIRouter, HTTPException

from sentinel.schemas.checks import ThreatRequest, ThreatResponse
from sentinel.services.fraud_checker import run_check
from sentinel.services.severity import is_alert_worthy

router = APIRouter()


@router.post("/analyze", response_model=ThreatResponse)
def analyze_threat(request: ThreatRequest):
    """Run the matching analyzer only; no LLM call."""
    if not request.content.strip():
        raise HTTPException(status_code=400, detail="Missing content")
    analysis = run_check(
        request.type,
        request.content,
        sender=request.sender,
        metadata=request.metadata,
        mascrow_hash=request.mascrow_hash,
    )
    return ThreatResponse(analysis=analysis, alert=is_alert_worthy(analysis.severity))
