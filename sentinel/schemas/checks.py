from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from sentinel.schemas.threat import CallMetadata, RiskLevel, Severity, ThreatAnalysis


class CheckType(str, Enum):
    URL = "url"
    PHONE = "phone"
    QR = "qr"
    WHATSAPP = "whatsapp"
    MESSAGE = "message"
    EMAIL = "email"


class FraudCheckRequest(BaseModel):
    """Dashboard fraud-checker input.

    For `message` checks `input_value` carries `sender|||content`.
    """

    check_type: CheckType
    input_value: str


class FraudCheckResult(BaseModel):
    """Fields a caller persists as a fraud-checker history record."""

    check_type: CheckType
    input_value: str
    fraud_score: float
    risk_level: Severity
    indicators: List[str]
    ai_analysis: str


class ThreatRequest(BaseModel):
    type: CheckType
    content: str
    sender: Optional[str] = None
    metadata: Optional[CallMetadata] = None
    mascrow_hash: Optional[str] = None


class ThreatResponse(BaseModel):
    analysis: ThreatAnalysis
    alert: bool


class QrValidateRequest(BaseModel):
    qr_content: str
    mascrow_hash: Optional[str] = None


class QrValidateResponse(BaseModel):
    analysis: ThreatAnalysis
    is_valid_mascrow: bool
    mascrow_hash: str  # freshly computed for the submitted content
    decoded_url: str
    risk_level: RiskLevel


class FingerprintRequest(BaseModel):
    content: str
    salt: str = ""


class CallCheckRequest(BaseModel):
    phone_number: str
    transcript: Optional[str] = None
    caller_name: Optional[str] = None
    call_duration: Optional[float] = None


class SenderContentRequest(BaseModel):
    sender: str = ""
    content: str


class FraudAlert(BaseModel):
    type: str  # call / email / message
    sender: str
    content: str
    risk_level: RiskLevel
    severity: Severity
    score: float
    reason: List[str]
    ai_analysis: str
    notify: bool
    overall_score: Optional[float] = None  # message + embedded links, when combined


class RuleDescription(BaseModel):
    name: str
    weight: float
    description: str


class EvidenceReportRequest(BaseModel):
    check_type: CheckType
    input_value: str
    fraud_score: float
    risk_level: Severity
    indicators: List[str] = []
    ai_analysis: str = ""


class EvidenceReport(BaseModel):
    methodology: str
    text_report: str
