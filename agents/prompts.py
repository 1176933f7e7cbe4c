"""Prompt template for the strategy analysis call."""

from typing import Tuple

from exceptions import EmptyTranscriptError


ROLE_STATEMENT = (
    "You are a senior enterprise cloud solutions architect and executive technology strategist.\n"
    "Analyze the following enterprise discovery call transcript and produce a concise, "
    "action-oriented cloud modernization strategy."
)

STRATEGIC_REQUIREMENTS: Tuple[str, ...] = (
    'Executive Precision: Provide a punchy executive summary focused on the "Why" and "What now".',
    "Business Outcomes: Clearly define the business value and expected outcomes for every recommendation.",
    "Immediate Next Steps: Provide concise, outcome-oriented immediate actions. Include specific, "
    "high-impact demo directions and targeted validation questions to confirm strategy fit.",
    "Architectural Layering: Map recommendations to Foundation, Identity, Network, Security, Storage, "
    "Compute, and AI layers.",
    "Use Case Alignment: Identify at least 5 distinct, high-impact use cases from the transcript. Format "
    "each using the STAR (Situation, Task, Action, Result) or SPAR framework as appropriate, but "
    'prioritize STAR for at least 2 of them. Each use case must include a specific "industry_relevance" '
    "scenario.",
    "Visual Strategy: Provide Mermaid.js code for a Use Case diagram and a System Technical Architecture "
    "diagram. The Use Case diagram must illustrate key actors (e.g., Client Stakeholders, Cloud Architect, "
    "Analysis System) and their interactions with the system. The System Technical Architecture diagram "
    "must visually represent the proposed cloud modernization strategy, showing the different "
    "architectural layers (Foundation, Identity, Network, Security, Storage, Compute, AI) and key AWS "
    "services recommended for each layer.",
    "Pricing & Pilot: Include specific, actionable AWS monthly pricing estimates for each recommendation. "
    "The pricing_model should specify typical AWS models (e.g., On-Demand, Reserved Instances, Spot "
    "Instances, or Serverless/Pay-as-you-go). The cost_breakdown must detail the calculation logic for "
    'all core services involved (e.g., "EC2 t3.medium x 2: $60/mo", "RDS db.t3.small: $45/mo", '
    '"S3 1TB: $23/mo"). Provide a measurable pilot project.',
)

CLOSING_LINE = "Output must be executive-ready: concise, high-impact, and devoid of technical fluff."


def build_strategy_prompt(transcript: str) -> str:
    """Build the instruction text for one transcript.

    The transcript is embedded exactly as given; encoding it is the
    transport's job.

    Raises:
        EmptyTranscriptError: transcript is empty or whitespace-only
    """
    if not transcript or not transcript.strip():
        raise EmptyTranscriptError("Transcript is empty")

    requirements = "\n".join(
        f"{number}. {requirement}"
        for number, requirement in enumerate(STRATEGIC_REQUIREMENTS, start=1)
    )
    return (
        f"{ROLE_STATEMENT}\n\n"
        f"Transcript:\n{transcript}\n\n"
        f"Strategic Requirements:\n{requirements}\n\n"
        f"{CLOSING_LINE}"
    )
