"""Render an AnalysisResult as a Markdown report.

Rendering is a pure function of the result (and the diagram renderer): the
same input always yields the same text. Empty sections are left out.
"""

from typing import Dict, List, Optional

from contracts import AnalysisResult, ArchitectureLayer, Recommendation, MatchedUseCase

from .diagrams import DiagramRenderer, MermaidFenceRenderer, render_diagram_safely


REPORT_TITLE = "Cloud Modernization Strategy"

EMPTY_STATE = (
    "## Ready for Analysis\n\n"
    "Paste a discovery call transcript to generate an executive-ready "
    "cloud modernization strategy."
)

LAYER_ICONS: Dict[ArchitectureLayer, str] = {
    ArchitectureLayer.FOUNDATION: "🧱",
    ArchitectureLayer.IDENTITY: "🔒",
    ArchitectureLayer.NETWORK: "🌐",
    ArchitectureLayer.SECURITY: "🛡️",
    ArchitectureLayer.STORAGE: "🗄️",
    ArchitectureLayer.COMPUTE: "⚙️",
    ArchitectureLayer.AI: "🧠",
}
DEFAULT_LAYER_ICON = "›"


def format_confidence(score: float) -> str:
    """Format a confidence score as a whole percentage. Out-of-range scores are not clamped."""
    return f"{score * 100:.0f}%"


def layer_icon(architecture_layer: str) -> str:
    try:
        return LAYER_ICONS[ArchitectureLayer(architecture_layer)]
    except ValueError:
        return DEFAULT_LAYER_ICON


def _bullets(items: List[str], marker: str = "-") -> List[str]:
    return [f"{marker} {item}" for item in items if item]


def _labelled(label: str, value: str) -> List[str]:
    return [f"- **{label}:** {value}"] if value else []


def _list_block(heading: str, items: List[str]) -> List[str]:
    lines = _bullets(items)
    if not lines:
        return []
    return [f"\n**{heading}**\n", *lines]


def _render_recommendation(rank: int, rec: Recommendation) -> List[str]:
    lines = [
        f"\n### {rank}. {layer_icon(rec.architecture_layer)} {rec.solution_name}",
        f"\n`{rec.architecture_layer}` | Confidence **{format_confidence(rec.confidence_score)}**\n",
    ]
    if rec.transcript_reference:
        lines.append(f'> "{rec.transcript_reference}"\n')
    lines.extend(_labelled("Reason", rec.technical_reason))
    lines.extend(_labelled("Business value", rec.business_value))
    lines.extend(_labelled("Why it fits", rec.why_it_fits))
    pricing = " | ".join(part for part in (rec.pricing_model, rec.estimated_monthly_cost) if part)
    lines.extend(_labelled("Pricing", pricing))
    lines.extend(_list_block("Cost breakdown", rec.cost_breakdown))
    if rec.complementary_solutions:
        lines.append(f"\n**Complementary solutions:** {', '.join(rec.complementary_solutions)}")
    return lines


def _render_use_case(uc: MatchedUseCase) -> List[str]:
    second_label = "Task" if uc.is_star else "Problem"
    lines = [f"\n### {uc.scenario_name} ({uc.format})\n"]
    lines.extend(_labelled("Situation", uc.situation))
    lines.extend(_labelled(second_label, uc.problem_or_task))
    lines.extend(_labelled("Action", uc.action))
    lines.extend(_labelled("Result", uc.result))
    if uc.industry_relevance:
        lines.append(f"\n*Industry relevance:* {uc.industry_relevance}")
    return lines


def render_markdown(
    result: Optional[AnalysisResult],
    diagram_renderer: Optional[DiagramRenderer] = None,
) -> str:
    """Render the report. ``None`` renders the empty state."""
    if result is None:
        return EMPTY_STATE

    diagram_renderer = diagram_renderer or MermaidFenceRenderer()
    snapshot = result.client_snapshot
    sections = [f"# {REPORT_TITLE}"]

    if result.executive_summary:
        sections.extend(["\n## Executive Summary\n", f'> "{result.executive_summary}"'])

    sections.append("\n## Client Snapshot\n")
    sections.extend(_labelled("Organization type", snapshot.organization_type))
    sections.extend(_labelled("Maturity level", snapshot.technical_maturity_level))
    if result.core_drivers:
        sections.append("\n**Core drivers:** " + " ".join(f"`{d}`" for d in result.core_drivers))
    sections.extend(_list_block("Top priorities", snapshot.top_priorities))
    sections.extend(_list_block("Detected pains", snapshot.detected_pains))
    sections.extend(_list_block("Detected goals", snapshot.detected_goals))

    risks = _bullets(snapshot.risk_factors, "- 🔴")
    constraints = _bullets(snapshot.constraints, "- 🟠")
    if risks or constraints:
        sections.extend(["\n## Risks & Constraints\n", *risks, *constraints])

    if result.top_recommendations:
        sections.append("\n## Top Recommendations")
        for rank, rec in enumerate(result.top_recommendations, start=1):
            sections.extend(_render_recommendation(rank, rec))

    if result.matched_use_cases:
        sections.append("\n## Matched Use Cases")
        for uc in result.matched_use_cases:
            sections.extend(_render_use_case(uc))

    sections.append("\n## Diagrams")
    for title, source in (
        ("Use Case Diagram", result.diagrams.use_case_diagram),
        ("Technical Architecture", result.diagrams.tech_architecture_diagram),
    ):
        sections.extend([f"\n### {title}\n", render_diagram_safely(diagram_renderer, title, source)])

    if result.implementation_phases:
        sections.append("\n## Implementation Roadmap")
        for number, phase in enumerate(result.implementation_phases, start=1):
            sections.append(f"\n### Phase {number}: {phase.phase_name}\n")
            sections.extend(_labelled("Focus", phase.focus))
            sections.extend(_labelled("Outcome", phase.expected_outcome))

    pilot = result.recommended_pilot
    if pilot.name:
        sections.extend([f"\n## Recommended Pilot: {pilot.name}\n"])
        if pilot.why_this_pilot:
            sections.append(pilot.why_this_pilot)
        sections.extend(_list_block("Architecture", pilot.high_level_architecture))
        sections.extend(_list_block("Success metrics", pilot.measurable_success_metrics))

    steps = result.next_steps
    step_lines = [
        *_labelled("Demo direction", steps.demo_direction),
        *_labelled("Follow-up focus", steps.follow_up_focus),
        *_list_block("Validation questions", steps.validation_questions),
    ]
    if step_lines:
        sections.extend(["\n## Next Steps\n", *step_lines])

    return "\n".join(sections) + "\n"
