from __future__ import annotations

from typing import Optional

from sentinel.core.logger import get_logger
from sentinel.schemas.checks import CheckType
from sentinel.schemas.threat import ThreatAnalysis
from sentinel.services.llm_client import LLMUnavailable, TextGenerator

log = get_logger(__name__)

FALLBACK_PREFIX = "AI analysis temporarily unavailable. Pattern-based analysis: "

_PROMPTS = {
    CheckType.URL: (
        'Analyze this URL for fraud/phishing risks: "{value}". Risk score: {score}. '
        "Indicators: {indicators}. Provide a brief security assessment and recommendation."
    ),
    CheckType.PHONE: (
        'Analyze this phone number for spoofing/fraud: "{value}". Risk score: {score}. '
        "Indicators: {indicators}. Provide a brief assessment."
    ),
    CheckType.QR: (
        'Analyze this QR code content for fraud: "{value}". Risk score: {score}. '
        "Indicators: {indicators}. Provide recommendations."
    ),
    CheckType.WHATSAPP: (
        'Analyze this WhatsApp URL for fraud: "{value}". Risk score: {score}. '
        "Indicators: {indicators}. Is it safe?"
    ),
    CheckType.MESSAGE: (
        "Analyze this message for scams and fraud:\nFrom: {sender}\nContent: {value}\n\n"
        "Risk score: {score}. Indicators: {indicators}. "
        "Provide a brief assessment and safety recommendation."
    ),
    CheckType.EMAIL: (
        "Analyze this email for phishing and fraud:\nFrom: {sender}\nContent: {value}\n"
        "Risk Level: {severity}\nThreat Indicators: {indicators}\n\n"
        "Provide a brief one-sentence assessment of the email's legitimacy:"
    ),
}

_CALL_PROMPT = (
    "Analyze this incoming call for fraud:\nPhone: {value}\nTranscript: {transcript}\n"
    "Risk Level: {severity}\nThreat Indicators: {indicators}\n\n"
    "Provide a brief one-sentence fraud assessment:"
)

# Email bodies are truncated before being sent to the model.
_MAX_PROMPT_CONTENT = 500


def build_prompt(
    check_type: CheckType,
    value: str,
    analysis: ThreatAnalysis,
    sender: Optional[str] = None,
) -> str:
    if check_type is CheckType.EMAIL:
        value = value[:_MAX_PROMPT_CONTENT]
    return _PROMPTS[check_type].format(
        value=value,
        sender=sender or "unknown",
        score=analysis.score,
        severity=analysis.severity.value,
        indicators=", ".join(analysis.indicators),
    )


def build_call_prompt(phone_number: str, transcript: Optional[str], analysis: ThreatAnalysis) -> str:
    return _CALL_PROMPT.format(
        value=phone_number,
        transcript=transcript or "(none)",
        severity=analysis.severity.value,
        indicators=", ".join(analysis.indicators),
    )


def fallback_summary(analysis: ThreatAnalysis) -> str:
    """Summary assembled purely from the indicators the engine produced."""
    return FALLBACK_PREFIX + "; ".join(analysis.indicators)


async def assess(
    analysis: ThreatAnalysis,
    prompt: str,
    generator: Optional[TextGenerator],
) -> str:
    """Ask the LLM for an assessment; fall back to the indicator summary on failure."""
    if generator is None:
        return fallback_summary(analysis)
    try:
        text = await generator.generate(prompt)
    except LLMUnavailable as e:
        log.warning("AI analysis unavailable, using pattern-based summary: %s", e)
        return fallback_summary(analysis)
    return text.strip()
