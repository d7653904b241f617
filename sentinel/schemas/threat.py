from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ThreatCategory(str, Enum):
    URL_PHISHING = "url-phishing"
    MALWARE_LINK = "malware-link"
    SOCIAL_ENGINEERING = "social-engineering"
    QR_SCAM = "qr-scam"
    CALL_FRAUD = "call-fraud"
    CREDENTIAL_THEFT = "credential-theft"
    MESSAGE_FRAUD = "message-fraud"


class Severity(str, Enum):
    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RiskLevel(str, Enum):
    """Collapsed caller-facing scale used by alerts and QR scans."""

    SAFE = "safe"
    WARNING = "warning"
    DANGEROUS = "dangerous"


class CallMetadata(BaseModel):
    caller_name: Optional[str] = None
    call_duration: Optional[float] = None  # seconds
    transcript: Optional[str] = None


class ThreatAnalysis(BaseModel):
    category: ThreatCategory
    score: float = Field(ge=0.0, le=1.0)
    severity: Severity
    indicators: List[str] = Field(default_factory=list)
    rules: List[str] = Field(default_factory=list)  # rule names, parallel to indicators
    recommendations: List[str] = Field(default_factory=list)


class CombinedAnalysis(BaseModel):
    analyses: List[ThreatAnalysis]
    overall_score: float = Field(ge=0.0, le=1.0)
    overall_severity: Severity
