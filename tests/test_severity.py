import pytest

from sentinel.schemas.threat import RiskLevel, Severity
from sentinel.services.severity import clamp_score, classify_severity, is_alert_worthy, to_risk_level


@pytest.mark.parametrize(
    "score,expected",
    [
        (0.0, Severity.SAFE),
        (0.1999, Severity.SAFE),
        (0.2, Severity.LOW),
        (0.3999, Severity.LOW),
        (0.4, Severity.MEDIUM),
        (0.5999, Severity.MEDIUM),
        (0.6, Severity.HIGH),
        (0.7999, Severity.HIGH),
        (0.8, Severity.CRITICAL),
        (1.0, Severity.CRITICAL),
    ],
)
def test_band_boundaries(score, expected):
    assert classify_severity(score) is expected


def test_classification_is_monotonic():
    order = [Severity.SAFE, Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL]
    levels = [order.index(classify_severity(i / 100)) for i in range(0, 101)]
    assert levels == sorted(levels)


def test_clamp_score_saturates_and_floors():
    assert clamp_score(1.15) == 1.0
    assert clamp_score(-0.1) == 0.0
    # 0.1 + 0.2 + 0.1 is 0.4000000000000001 in binary floating point
    assert clamp_score(0.1 + 0.2 + 0.1) == 0.4
    assert classify_severity(clamp_score(0.1 + 0.2 + 0.1)) is Severity.MEDIUM


@pytest.mark.parametrize(
    "severity,expected",
    [
        (Severity.CRITICAL, RiskLevel.DANGEROUS),
        (Severity.HIGH, RiskLevel.DANGEROUS),
        (Severity.MEDIUM, RiskLevel.WARNING),
        (Severity.LOW, RiskLevel.SAFE),
        (Severity.SAFE, RiskLevel.SAFE),
    ],
)
def test_three_level_mapping(severity, expected):
    assert to_risk_level(severity) is expected


def test_alert_worthy_levels():
    assert is_alert_worthy(Severity.HIGH)
    assert is_alert_worthy(Severity.CRITICAL)
    assert not is_alert_worthy(Severity.MEDIUM)
