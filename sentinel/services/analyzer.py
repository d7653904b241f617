"""
Analyzers: score one piece of content against its indicator catalog.

Every analyzer is a pure function returning a ThreatAnalysis:
- builds the feature object for its content type,
- evaluates the catalog in order,
- sums the weights of every hit and clamps to [0, 1],
- buckets the score with the shared severity bands.

No I/O, no clock, no shared state. Empty or missing primary content yields a
neutral zero-score result; unparsable URLs are reported as an indicator, not
raised.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence

from sentinel.core.logger import get_logger
from sentinel.schemas.threat import CallMetadata, ThreatAnalysis, ThreatCategory
from sentinel.services import indicators as ind
from sentinel.services.mascrow import verify_fingerprint
from sentinel.services.severity import clamp_score, classify_severity

log = get_logger(__name__)


RECOMMENDATIONS: Dict[ThreatCategory, List[str]] = {
    ThreatCategory.URL_PHISHING: [
        "Do not visit this website",
        "Do not download files from this URL",
        "Report the URL to security team",
        "Clear browser cache if already visited",
    ],
    ThreatCategory.MALWARE_LINK: [
        "Do not open or download from this link",
        "Run a malware scan if the link was opened",
        "Report the URL to security team",
    ],
    ThreatCategory.CALL_FRAUD: [
        "Do not answer calls from unknown numbers",
        "Hang up if asked for personal information",
        "Never provide account numbers or passwords over phone",
        "Report suspicious calls to authorities",
    ],
    ThreatCategory.QR_SCAM: [
        "Do not scan QR codes from untrusted sources",
        "Verify the source of QR code before scanning",
        "Check the destination URL before clicking",
        "Use browser security features for additional protection",
    ],
    ThreatCategory.SOCIAL_ENGINEERING: [
        "Only open WhatsApp links from wa.me or whatsapp.com",
        "Do not share verification codes received over chat",
        "Confirm the contact through a known number before replying",
    ],
    ThreatCategory.CREDENTIAL_THEFT: [
        "Do not click links or download attachments",
        "Do not provide personal or financial information",
        "Report the email to your organization",
        "Delete the email",
    ],
    ThreatCategory.MESSAGE_FRAUD: [
        "Do not reply or click links in the message",
        "Never share OTPs, PINs or passwords",
        "Contact the organization through its official channel",
        "Block and report the sender",
    ],
}


def _build(category: ThreatCategory, hits: Sequence[ind.RuleHit]) -> ThreatAnalysis:
    score = clamp_score(sum(hit.weight for hit in hits))
    log.debug("%s: %d rule hits, score %.4f", category.value, len(hits), score)
    return ThreatAnalysis(
        category=category,
        score=score,
        severity=classify_severity(score),
        indicators=[hit.message for hit in hits],
        rules=[hit.rule for hit in hits],
        recommendations=list(RECOMMENDATIONS[category]),
    )


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def analyze_url(url: Optional[str]) -> ThreatAnalysis:
    category = ThreatCategory.URL_PHISHING
    if _blank(url):
        return _build(category, [])
    parts = ind.parse_url(url)
    if parts is None:
        return _build(category, ind.URL_INVALID.evaluate(url))
    return _build(category, ind.evaluate_rules(ind.URL_RULES, parts))


def analyze_phone(phone: Optional[str], metadata: Optional[CallMetadata] = None) -> ThreatAnalysis:
    """Score a phone number; call metadata rules apply only when metadata is given."""
    category = ThreatCategory.CALL_FRAUD
    if _blank(phone):
        return _build(category, [])
    features = ind.PhoneFeatures(raw=phone, digits=re.sub(r"\D", "", phone), metadata=metadata)
    hits = ind.evaluate_rules(ind.PHONE_RULES, features)
    if metadata is not None:
        hits += ind.evaluate_rules(ind.CALL_RULES, features)
    return _build(category, hits)


def analyze_qr(content: Optional[str], fingerprint: Optional[str] = None) -> ThreatAnalysis:
    """Score decoded QR text and check it against a previously issued fingerprint.

    A missing (None or empty) fingerprint and a mismatched one are separate
    rules; at most one of them fires.
    """
    category = ThreatCategory.QR_SCAM
    if _blank(content):
        return _build(category, [])
    features = ind.QrFeatures(
        content=content,
        fingerprint=fingerprint,
        fingerprint_valid=bool(fingerprint) and verify_fingerprint(fingerprint, content),
    )
    hits = ind.evaluate_rules(ind.QR_RULES, features)
    hits += ind.evaluate_rules(ind.FINGERPRINT_RULES, features)
    return _build(category, hits)


def analyze_whatsapp_url(url: Optional[str]) -> ThreatAnalysis:
    category = ThreatCategory.SOCIAL_ENGINEERING
    if _blank(url):
        return _build(category, [])
    features = ind.WhatsAppFeatures(raw=url, host=ind.host_of(url))
    hits = ind.evaluate_rules(ind.WHATSAPP_RULES, features)
    # Negative adjustment goes last; _build floors the sum at 0.
    hits += ind.evaluate_rules(ind.WHATSAPP_ADJUSTMENTS, features)
    return _build(category, hits)


def _message_hits(sender: Optional[str], body: Optional[str]) -> List[ind.RuleHit]:
    features = ind.MessageFeatures(
        sender=sender or "",
        body=body,
        urls=ind.extract_urls(body),
    )
    return ind.evaluate_rules(ind.MESSAGE_RULES, features)


def analyze_message(sender: Optional[str], body: Optional[str]) -> ThreatAnalysis:
    """Score an SMS/chat message. Each phishing keyword and each suspicious
    embedded URL adds its weight independently."""
    category = ThreatCategory.MESSAGE_FRAUD
    if _blank(body):
        return _build(category, [])
    return _build(category, _message_hits(sender, body))


def analyze_email(sender: Optional[str], body: Optional[str]) -> ThreatAnalysis:
    category = ThreatCategory.CREDENTIAL_THEFT
    if _blank(body):
        return _build(category, [])
    return _build(category, _message_hits(sender, body))
