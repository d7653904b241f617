from fastapi import APIRouter, HTTPException

from sentinel.core.logger import get_logger
from sentinel.schemas.checks import FingerprintRequest, QrValidateRequest, QrValidateResponse
from sentinel.services.analyzer import analyze_qr
from sentinel.services.mascrow import compute_fingerprint, verify_fingerprint
from sentinel.services.severity import to_risk_level

router = APIRouter()
log = get_logger(__name__)


def _decoded_url(content: str) -> str:
    if content.startswith("http"):
        return content.split()[0]
    return content


@router.post("/validate", response_model=QrValidateResponse)
def validate_qr(request: QrValidateRequest):
    """Analyze decoded QR text and verify its Mascrow fingerprint."""
    if not request.qr_content.strip():
        raise HTTPException(status_code=400, detail="Missing qr_content")
    analysis = analyze_qr(request.qr_content, request.mascrow_hash)
    is_valid = bool(request.mascrow_hash) and verify_fingerprint(request.mascrow_hash, request.qr_content)
    if not is_valid and request.mascrow_hash:
        log.warning("Mascrow mismatch for submitted QR content")
    return QrValidateResponse(
        analysis=analysis,
        is_valid_mascrow=is_valid,
        mascrow_hash=compute_fingerprint(request.qr_content),
        decoded_url=_decoded_url(request.qr_content),
        risk_level=to_risk_level(analysis.severity),
    )


@router.post("/fingerprint")
def fingerprint_qr(request: FingerprintRequest):
    """Issue a Mascrow fingerprint for QR content at generation time."""
    return {"mascrow_hash": compute_fingerprint(request.content, request.salt)}
