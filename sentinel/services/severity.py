"""
Severity banding shared by every analyzer, the aggregator and the API.

Bands are inclusive on the lower bound:

    [0.0, 0.2) safe
    [0.2, 0.4) low
    [0.4, 0.6) medium
    [0.6, 0.8) high
    [0.8, 1.0] critical
"""

from __future__ import annotations

from typing import Tuple

from sentinel.schemas.threat import RiskLevel, Severity

_BANDS: Tuple[Tuple[float, Severity], ...] = (
    (0.8, Severity.CRITICAL),
    (0.6, Severity.HIGH),
    (0.4, Severity.MEDIUM),
    (0.2, Severity.LOW),
)

_ALERT_LEVELS = frozenset({Severity.HIGH, Severity.CRITICAL})


def clamp_score(raw: float) -> float:
    """Clamp an accumulated score to [0, 1].

    Rounded to 4 places so sums like 0.1 + 0.2 + 0.1 land exactly on a band edge.
    """
    return round(min(1.0, max(0.0, raw)), 4)


def classify_severity(score: float) -> Severity:
    for lower, level in _BANDS:
        if score >= lower:
            return level
    return Severity.SAFE


def to_risk_level(severity: Severity) -> RiskLevel:
    if severity in _ALERT_LEVELS:
        return RiskLevel.DANGEROUS
    if severity is Severity.MEDIUM:
        return RiskLevel.WARNING
    return RiskLevel.SAFE


def is_alert_worthy(severity: Severity) -> bool:
    return severity in _ALERT_LEVELS
