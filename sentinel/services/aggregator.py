from __future__ import annotations

from typing import List, Optional, Sequence

from sentinel.schemas.threat import CombinedAnalysis, ThreatAnalysis
from sentinel.services.analyzer import analyze_message, analyze_url
from sentinel.services.indicators import extract_urls
from sentinel.services.severity import clamp_score, classify_severity


def combine(analyses: Sequence[ThreatAnalysis]) -> float:
    """Mean score of independent analyses, clamped to [0, 1]; 0 when empty."""
    if not analyses:
        return 0.0
    return clamp_score(sum(a.score for a in analyses) / len(analyses))


def combine_analyses(analyses: Sequence[ThreatAnalysis]) -> CombinedAnalysis:
    overall = combine(analyses)
    return CombinedAnalysis(
        analyses=list(analyses),
        overall_score=overall,
        overall_severity=classify_severity(overall),
    )


def analyze_message_with_links(sender: Optional[str], body: Optional[str]) -> CombinedAnalysis:
    """Analyze a message body, then each embedded URL on its own, and combine.

    The message analysis always comes first, followed by one URL analysis per
    link in order of appearance.
    """
    analyses: List[ThreatAnalysis] = [analyze_message(sender, body)]
    analyses.extend(analyze_url(url) for url in extract_urls(body or ""))
    return combine_analyses(analyses)
