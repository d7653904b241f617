from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from sentinel.core.logger import get_logger
from sentinel.schemas.checks import CallCheckRequest, CheckType, FraudAlert, SenderContentRequest
from sentinel.schemas.threat import CallMetadata, ThreatAnalysis
from sentinel.services.aggregator import analyze_message_with_links
from sentinel.services.analyzer import analyze_email, analyze_phone
from sentinel.services.assessment import assess, build_call_prompt, build_prompt
from sentinel.services.llm_client import TextGenerator, get_text_generator
from sentinel.services.severity import is_alert_worthy, to_risk_level

router = APIRouter()
log = get_logger(__name__)

# Stored alert content is truncated for emails.
_EMAIL_ALERT_CONTENT = 200


def _alert(
    kind: str,
    sender: str,
    content: str,
    analysis: ThreatAnalysis,
    ai_analysis: str,
    overall_score: Optional[float] = None,
) -> FraudAlert:
    notify = is_alert_worthy(analysis.severity)
    if notify:
        log.info("%s alert from %s: severity=%s", kind, sender, analysis.severity.value)
    return FraudAlert(
        type=kind,
        sender=sender,
        content=content,
        risk_level=to_risk_level(analysis.severity),
        severity=analysis.severity,
        score=analysis.score,
        reason=analysis.indicators,
        ai_analysis=ai_analysis,
        notify=notify,
        overall_score=overall_score,
    )


@router.post("/analyze-call", response_model=FraudAlert)
async def analyze_call(
    request: CallCheckRequest,
    generator: Optional[TextGenerator] = Depends(get_text_generator),
):
    """Score an incoming call from its number and optional transcript/caller details."""
    if not request.phone_number.strip():
        raise HTTPException(status_code=400, detail="Missing phone_number")
    metadata = None
    if any(v is not None for v in (request.transcript, request.caller_name, request.call_duration)):
        metadata = CallMetadata(
            caller_name=request.caller_name,
            call_duration=request.call_duration,
            transcript=request.transcript,
        )
    analysis = analyze_phone(request.phone_number, metadata)
    prompt = build_call_prompt(request.phone_number, request.transcript, analysis)
    ai_analysis = await assess(analysis, prompt, generator)
    return _alert("call", request.phone_number, request.transcript or "", analysis, ai_analysis)


@router.post("/analyze-email", response_model=FraudAlert)
async def analyze_incoming_email(
    request: SenderContentRequest,
    generator: Optional[TextGenerator] = Depends(get_text_generator),
):
    if not request.content.strip():
        raise HTTPException(status_code=400, detail="Missing content")
    analysis = analyze_email(request.sender, request.content)
    prompt = build_prompt(CheckType.EMAIL, request.content, analysis, sender=request.sender)
    ai_analysis = await assess(analysis, prompt, generator)
    return _alert(
        "email",
        request.sender,
        request.content[:_EMAIL_ALERT_CONTENT],
        analysis,
        ai_analysis,
    )


@router.post("/analyze-message", response_model=FraudAlert)
async def analyze_incoming_message(
    request: SenderContentRequest,
    generator: Optional[TextGenerator] = Depends(get_text_generator),
):
    """Score an SMS/chat message, plus each embedded link, into one alert."""
    if not request.content.strip():
        raise HTTPException(status_code=400, detail="Missing content")
    combined = analyze_message_with_links(request.sender, request.content)
    analysis = combined.analyses[0]
    prompt = build_prompt(CheckType.MESSAGE, request.content, analysis, sender=request.sender)
    ai_analysis = await assess(analysis, prompt, generator)
    return _alert(
        "message",
        request.sender,
        request.content,
        analysis,
        ai_analysis,
        overall_score=combined.overall_score,
    )
