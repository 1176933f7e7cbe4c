"""Shared fixtures: a complete strategy payload and a scripted provider."""

import copy
import json
from typing import Any, Dict, List, Optional

import pytest

from config import PROVIDER_KEY_ENV_VARS, Settings
from contracts import AnalysisResult
from providers.base import LLMProvider, LLMResponse


CLAIMS_STRATEGY: Dict[str, Any] = {
    "client_snapshot": {
        "organization_type": "Mid-size property & casualty insurer",
        "technical_maturity_level": "Low - monolithic on-prem, batch-oriented",
        "top_priorities": ["Eliminate claims downtime", "Real-time fraud detection"],
        "constraints": ["Results within 6 months", "Run-rate under $20k/month OpEx"],
        "risk_factors": ["40TB legacy SQL Server with brittle schema", "Flat internal network"],
        "detected_pains": ["$50k/hour downtime cost", "Fraud flagged after payout"],
        "detected_goals": ["Zero Trust security posture", "Elastic month-end capacity"],
    },
    "core_drivers": ["Resilience", "Fraud loss reduction", "Zero Trust"],
    "top_recommendations": [
        {
            "solution_name": "Multi-AZ claims services on ECS Fargate",
            "architecture_layer": "Compute",
            "business_value": "Removes the single point of failure behind $50k/hour outages",
            "technical_reason": "Stateless containers across availability zones with auto scaling",
            "transcript_reference": "we lose roughly $50k per hour in downtime cost",
            "confidence_score": 0.83,
            "pricing_model": "Serverless/Pay-as-you-go",
            "estimated_monthly_cost": "$4,200.00/mo",
            "cost_breakdown": ["Fargate 8 vCPU steady: $2,900/mo", "ALB: $300/mo"],
            "why_it_fits": "Fits the 6-month window without a capital project",
            "complementary_solutions": ["AWS Backup", "CloudWatch Synthetics"],
        },
        {
            "solution_name": "Real-time fraud scoring with SageMaker",
            "architecture_layer": "AI",
            "business_value": "Flags suspicious claims before payment",
            "technical_reason": "Streaming inference on claim intake events",
            "transcript_reference": "by the time we flag a suspicious claim it has often been paid out",
            "confidence_score": 0.77,
            "pricing_model": "On-Demand",
            "estimated_monthly_cost": "$3,100.00/mo",
            "cost_breakdown": ["SageMaker ml.m5.large x 2: $200/mo", "Kinesis: $400/mo"],
            "why_it_fits": "Directly targets the pilot the VP Operations asked for",
            "complementary_solutions": ["Amazon Fraud Detector"],
        },
        {
            "solution_name": "Zero Trust access with Verified Access",
            "architecture_layer": "Security",
            "business_value": "Replaces flat VPN access with per-app policy",
            "technical_reason": "Identity-aware access without network-level trust",
            "transcript_reference": "fraud detection is a batch job that runs overnight",
            "confidence_score": 1.4,
            "pricing_model": "Pay-as-you-go",
            "estimated_monthly_cost": "$1,500.00/mo",
            "cost_breakdown": ["Verified Access endpoints x 3: $1,000/mo"],
            "why_it_fits": "Board mandate for Zero Trust",
            "complementary_solutions": [],
        },
    ],
    "matched_use_cases": [
        {
            "scenario_name": "Month-end claims surge",
            "format": "STAR",
            "situation": "Claims volume triples at month end",
            "problem_or_task": "Keep intake available during peaks",
            "action": "Auto-scale containerised intake",
            "result": "No capacity outages",
            "industry_relevance": "Catastrophe events create the same surge pattern",
        },
        {
            "scenario_name": "Pre-payment fraud hold",
            "format": "SPAR",
            "situation": "Fraud review is overnight",
            "problem_or_task": "Fraudulent claims are paid before review",
            "action": "Score claims in real time and hold high-risk payouts",
            "result": "Lower fraud leakage",
            "industry_relevance": "Standard practice for leading P&C carriers",
        },
    ],
    "diagrams": {
        "use_case_diagram": "graph LR\n  Adjuster --> Intake\n  Intake --> FraudScoring",
        "tech_architecture_diagram": "graph TD\n  ALB --> Fargate\n  Fargate --> Aurora",
    },
    "recommended_pilot": {
        "name": "Fraud scoring on new auto claims",
        "why_this_pilot": "Highest visible value inside the 6-month window",
        "high_level_architecture": ["Kinesis intake stream", "SageMaker endpoint"],
        "measurable_success_metrics": ["Fraud caught before payment up 30%"],
    },
    "implementation_phases": [
        {"phase_name": "Landing zone", "focus": "Accounts, identity, network", "expected_outcome": "Secure foundation"},
        {"phase_name": "Pilot", "focus": "Fraud scoring", "expected_outcome": "Measured fraud reduction"},
        {"phase_name": "Replatform", "focus": "Claims services", "expected_outcome": "Multi-AZ resilience"},
    ],
    "next_steps": {
        "demo_direction": "Live fraud scoring on sample claims",
        "follow_up_focus": "SQL Server migration path",
        "validation_questions": ["Which claim lines carry most fraud?", "Is Aurora acceptable to the DBA team?"],
    },
    "executive_summary": "Move claims off the single on-prem monolith and score fraud before payout.",
}


class ScriptedProvider(LLMProvider):
    """Provider that returns queued responses and records every call."""

    def __init__(self, responses: Optional[List[Any]] = None, default_model: str = "fake-model"):
        self.responses = list(responses or [])
        self.calls: List[Dict[str, Any]] = []
        self._default_model = default_model

    @property
    def name(self) -> str:
        return "scripted"

    @property
    def default_model(self) -> str:
        return self._default_model

    def generate(self, prompt, response_schema, model=None, max_tokens=16384) -> LLMResponse:
        self.calls.append({
            "prompt": prompt,
            "response_schema": response_schema,
            "model": model,
            "max_tokens": max_tokens,
        })
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return LLMResponse(
            content=item,
            input_tokens=100,
            output_tokens=200,
            model=model or self._default_model,
            provider=self.name,
        )


@pytest.fixture
def strategy_payload() -> Dict[str, Any]:
    return copy.deepcopy(CLAIMS_STRATEGY)


@pytest.fixture
def strategy_json(strategy_payload) -> str:
    return json.dumps(strategy_payload)


@pytest.fixture
def analysis_result(strategy_payload) -> AnalysisResult:
    return AnalysisResult.model_validate(strategy_payload)


@pytest.fixture
def test_settings(monkeypatch) -> Settings:
    # Keys in the developer environment must not leak into tests
    for names in PROVIDER_KEY_ENV_VARS.values():
        for name in names:
            monkeypatch.delenv(name, raising=False)
    return Settings(
        _env_file=None,
        gemini_api_key="test-gemini-key",
        openai_api_key="test-openai-key",
        anthropic_api_key="",
    )


@pytest.fixture
def make_provider():
    """Return the ScriptedProvider class so tests can build one per scenario."""
    return ScriptedProvider
