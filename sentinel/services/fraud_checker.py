from __future__ import annotations

from typing import Optional, Tuple

from sentinel.core.logger import get_logger
from sentinel.schemas.checks import CheckType, FraudCheckRequest, FraudCheckResult
from sentinel.schemas.threat import CallMetadata, ThreatAnalysis
from sentinel.services import analyzer
from sentinel.services.assessment import assess, build_prompt
from sentinel.services.llm_client import TextGenerator

log = get_logger(__name__)

MESSAGE_SEPARATOR = "|||"


def split_sender_content(input_value: str) -> Tuple[str, str]:
    """Split the dashboard's ``sender|||content`` encoding; no separator means no sender."""
    sender, sep, content = input_value.partition(MESSAGE_SEPARATOR)
    if not sep:
        return "", input_value
    return sender.strip(), content


def run_check(
    check_type: CheckType,
    content: str,
    sender: Optional[str] = None,
    metadata: Optional[CallMetadata] = None,
    mascrow_hash: Optional[str] = None,
) -> ThreatAnalysis:
    """Route content to the analyzer for its check type."""
    if check_type is CheckType.URL:
        return analyzer.analyze_url(content)
    if check_type is CheckType.PHONE:
        return analyzer.analyze_phone(content, metadata)
    if check_type is CheckType.QR:
        return analyzer.analyze_qr(content, mascrow_hash)
    if check_type is CheckType.WHATSAPP:
        return analyzer.analyze_whatsapp_url(content)
    if check_type is CheckType.MESSAGE:
        return analyzer.analyze_message(sender, content)
    if check_type is CheckType.EMAIL:
        return analyzer.analyze_email(sender, content)
    raise ValueError(f"Unsupported check type: {check_type}")


async def check_fraud(request: FraudCheckRequest, generator: Optional[TextGenerator]) -> FraudCheckResult:
    """Score the submission, ask the LLM for an assessment, and return the record fields."""
    sender: Optional[str] = None
    display_value = request.input_value
    if request.check_type in (CheckType.MESSAGE, CheckType.EMAIL):
        sender, display_value = split_sender_content(request.input_value)

    analysis = run_check(request.check_type, display_value, sender=sender)
    log.info(
        "fraud check type=%s score=%.2f severity=%s",
        request.check_type.value,
        analysis.score,
        analysis.severity.value,
    )

    prompt = build_prompt(request.check_type, display_value, analysis, sender=sender)
    ai_analysis = await assess(analysis, prompt, generator)

    return FraudCheckResult(
        check_type=request.check_type,
        input_value=display_value,
        fraud_score=analysis.score,
        risk_level=analysis.severity,
        indicators=analysis.indicators,
        ai_analysis=ai_analysis,
    )
