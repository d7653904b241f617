"""
Evidence reports: methodology text derived from the indicator catalog plus a
plain-text report users can attach to a cyber-crime complaint.

The methodology lists each rule with its weight straight from the catalog so
what users read always matches what the engine scores.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from sentinel.schemas.checks import CheckType, EvidenceReport, EvidenceReportRequest, RuleDescription
from sentinel.services.indicators import describe_catalog

_TITLES = {
    CheckType.URL: "URL Fraud Detection Methodology",
    CheckType.PHONE: "Phone Fraud Detection Methodology",
    CheckType.QR: "QR Code Fraud Detection Methodology",
    CheckType.WHATSAPP: "WhatsApp URL Fraud Detection Methodology",
    CheckType.MESSAGE: "Message Fraud Detection Methodology",
    CheckType.EMAIL: "Email Fraud Detection Methodology",
}

_RULE = "=" * 80

DISCLAIMER = (
    "DISCLAIMER: This report is generated based on pattern analysis and AI assessment.\n"
    "It is intended for informational purposes and fraud prevention. Users should\n"
    "cross-reference with official databases and consult with cybersecurity experts\n"
    "when filing legal complaints."
)


def rule_table(check_type: CheckType) -> List[RuleDescription]:
    return [
        RuleDescription(name=name, weight=weight, description=description)
        for name, weight, description in describe_catalog(check_type.value)
    ]


def _signed(weight: float) -> str:
    return f"{weight:+.2f}"


def methodology_text(check_type: CheckType, fraud_score: float, risk_level: str) -> str:
    lines = [f"{_TITLES[check_type]}:"]
    for rule in rule_table(check_type):
        lines.append(f"- {rule.name}: {rule.description} ({_signed(rule.weight)})")
    lines.append("")
    lines.append(f"Risk Score: {fraud_score * 100:.1f}% - {risk_level.upper()}")
    return "\n".join(lines)


def _section(title: str) -> str:
    return f"{_RULE}\n{title}\n{_RULE}"


def render_report(request: EvidenceReportRequest, generated_at: Optional[datetime] = None) -> EvidenceReport:
    generated_at = generated_at or datetime.now(timezone.utc)
    level = request.risk_level.value
    methodology = methodology_text(request.check_type, request.fraud_score, level)
    preview = request.input_value[:100]
    if len(request.input_value) > 100:
        preview += "..."
    numbered = "\n".join(f"{i}. {text}" for i, text in enumerate(request.indicators, start=1))

    parts = [
        _RULE,
        "PHISHNET SENTINEL EVIDENCE REPORT".center(80).rstrip(),
        _RULE,
        "",
        f"Generated: {generated_at.isoformat()}",
        "",
        _section("FRAUD DETECTION SUMMARY"),
        "",
        f"Check Type: {request.check_type.value.upper()}",
        f"Input: {preview}",
        f"Fraud Score: {request.fraud_score * 100:.1f}/100",
        f"Risk Level: {level.upper()}",
        "",
        _section(f"DETECTED INDICATORS ({len(request.indicators)})"),
        numbered or "None",
        "",
        _section("DETECTION METHODOLOGY"),
        methodology,
        "",
        _section("AI ANALYSIS"),
        request.ai_analysis or "Not available",
        "",
        _section("VERIFICATION DETAILS"),
        "System: PhishNet Sentinel v1.0",
        "",
        DISCLAIMER,
        "",
        _RULE,
    ]
    return EvidenceReport(methodology=methodology, text_report="\n".join(parts) + "\n")
