from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from sentinel.schemas.checks import FraudCheckRequest, FraudCheckResult
from sentinel.services.fraud_checker import check_fraud
from sentinel.services.llm_client import TextGenerator, get_text_generator

router = APIRouter()


@router.post("/analyze", response_model=FraudCheckResult)
async def analyze_submission(
    request: FraudCheckRequest,
    generator: Optional[TextGenerator] = Depends(get_text_generator),
):
    """Score a URL, phone number, QR payload, WhatsApp link or message and
    attach an AI assessment. The response carries the history-record fields."""
    if not request.input_value.strip():
        raise HTTPException(status_code=400, detail="Missing required fields")
    return await check_fraud(request, generator)
