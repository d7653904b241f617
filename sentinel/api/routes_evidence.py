from typing import List

from fastapi import APIRouter

from sentinel.schemas.checks import CheckType, EvidenceReport, EvidenceReportRequest, RuleDescription
from sentinel.services.evidence_report import render_report, rule_table

router = APIRouter()


@router.get("/methodology/{check_type}", response_model=List[RuleDescription])
def get_methodology(check_type: CheckType):
    """Rule names and weights the engine applies to this check type."""
    return rule_table(check_type)


@router.post("/generate-report", response_model=EvidenceReport)
def generate_report(request: EvidenceReportRequest):
    return render_report(request)
