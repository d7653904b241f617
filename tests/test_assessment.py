import pytest

from sentinel.schemas.checks import CheckType
from sentinel.services.analyzer import analyze_email, analyze_phone, analyze_url
from sentinel.services.assessment import (
    FALLBACK_PREFIX,
    assess,
    build_call_prompt,
    build_prompt,
    fallback_summary,
)
from sentinel.services.llm_client import LLMUnavailable


class FakeGenerator:
    def __init__(self, text):
        self.text = text
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        return self.text


class FailingGenerator:
    async def generate(self, prompt):
        raise LLMUnavailable("boom")


PHISHY_URL = "http://195.154.32.145/secure-verify-update/?redirect=https://bit.ly/xyz123"


@pytest.mark.asyncio
async def test_assess_returns_model_text():
    analysis = analyze_url(PHISHY_URL)
    gen = FakeGenerator("  Likely phishing; do not visit.  ")
    prompt = build_prompt(CheckType.URL, PHISHY_URL, analysis)
    out = await assess(analysis, prompt, gen)
    assert out == "Likely phishing; do not visit."
    assert gen.prompts == [prompt]


@pytest.mark.asyncio
async def test_assess_falls_back_on_failure():
    analysis = analyze_url(PHISHY_URL)
    out = await assess(analysis, "prompt", FailingGenerator())
    assert out == FALLBACK_PREFIX + "; ".join(analysis.indicators)


@pytest.mark.asyncio
async def test_assess_without_generator_uses_fallback():
    analysis = analyze_phone("5551234567")
    out = await assess(analysis, "prompt", None)
    assert out == fallback_summary(analysis)
    assert "555 prefix" in out


def test_url_prompt_carries_score_and_indicators():
    analysis = analyze_url(PHISHY_URL)
    prompt = build_prompt(CheckType.URL, PHISHY_URL, analysis)
    assert PHISHY_URL in prompt
    assert "Risk score: 0.7" in prompt
    assert "Direct IP address instead of domain name" in prompt


def test_message_prompt_includes_sender():
    analysis = analyze_email("boss@corp.example", "hi")
    prompt = build_prompt(CheckType.MESSAGE, "hi", analysis, sender="boss@corp.example")
    assert "From: boss@corp.example" in prompt


def test_email_prompt_truncates_body():
    body = "x" * 2000
    analysis = analyze_email("a@b.example", body)
    prompt = build_prompt(CheckType.EMAIL, body, analysis, sender="a@b.example")
    assert "x" * 500 in prompt
    assert "x" * 501 not in prompt


def test_call_prompt_handles_missing_transcript():
    analysis = analyze_phone("5551234567")
    prompt = build_call_prompt("5551234567", None, analysis)
    assert "Transcript: (none)" in prompt
    assert "Risk Level: medium" in prompt
