"""Strategy contracts: the structured document returned for one discovery transcript."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from enum import Enum


class ArchitectureLayer(str, Enum):
    """Layers used to group recommendations. Other labels are legal but have no icon."""
    FOUNDATION = "Foundation"
    IDENTITY = "Identity"
    NETWORK = "Network"
    SECURITY = "Security"
    STORAGE = "Storage"
    COMPUTE = "Compute"
    AI = "AI"


class UseCaseFormat(str, Enum):
    """Narrative formats for matched use cases."""
    STAR = "STAR"
    SPAR = "SPAR"


class _Contract(BaseModel):
    model_config = ConfigDict(frozen=True)


class ClientSnapshot(_Contract):
    """Who the client is and what they said they need."""
    organization_type: str = Field(...)
    technical_maturity_level: str = Field(...)
    top_priorities: List[str] = Field(...)
    constraints: List[str] = Field(...)
    risk_factors: List[str] = Field(...)
    detected_pains: List[str] = Field(...)
    detected_goals: List[str] = Field(...)


class Recommendation(_Contract):
    """A ranked solution recommendation with pricing."""
    solution_name: str = Field(...)
    architecture_layer: str = Field(..., description="Foundation, Identity, Network, Security, Storage, Compute or AI")
    business_value: str = Field(...)
    technical_reason: str = Field(...)
    transcript_reference: str = Field(..., description="Quote from the transcript that evidences this")
    confidence_score: float = Field(..., description="Nominally 0-1; not clamped")
    pricing_model: str = Field(...)
    estimated_monthly_cost: str = Field(..., description="Specific dollar amount (e.g., $150.00/mo)")
    cost_breakdown: List[str] = Field(...)
    why_it_fits: str = Field(...)
    complementary_solutions: List[str] = Field(..., description="Cross-sell opportunities")

    @property
    def layer(self) -> Optional[ArchitectureLayer]:
        """The known architecture layer, or None for a label outside the taxonomy."""
        try:
            return ArchitectureLayer(self.architecture_layer)
        except ValueError:
            return None


class MatchedUseCase(_Contract):
    """A use case told in STAR or SPAR form."""
    scenario_name: str = Field(...)
    format: str = Field(..., description="SPAR or STAR; used verbatim")
    situation: str = Field(...)
    problem_or_task: str = Field(..., description="Problem for SPAR, Task for STAR")
    action: str = Field(...)
    result: str = Field(...)
    industry_relevance: str = Field(...)

    @property
    def is_star(self) -> bool:
        return self.format == UseCaseFormat.STAR.value


class Diagrams(_Contract):
    """Diagram sources. Opaque to this package."""
    use_case_diagram: str = Field(...)
    tech_architecture_diagram: str = Field(...)


class RecommendedPilot(_Contract):
    """The pilot project to start with."""
    name: str = Field(...)
    why_this_pilot: str = Field(...)
    high_level_architecture: List[str] = Field(...)
    measurable_success_metrics: List[str] = Field(...)


class ImplementationPhase(_Contract):
    """One phase of the roadmap. Phases are in delivery order."""
    phase_name: str = Field(...)
    focus: str = Field(...)
    expected_outcome: str = Field(...)


class NextSteps(_Contract):
    """What to do after the call."""
    demo_direction: str = Field(...)
    follow_up_focus: str = Field(...)
    validation_questions: List[str] = Field(...)


class AnalysisResult(_Contract):
    """The full strategy document produced for one transcript."""
    client_snapshot: ClientSnapshot = Field(...)
    core_drivers: List[str] = Field(...)
    top_recommendations: List[Recommendation] = Field(...)
    matched_use_cases: List[MatchedUseCase] = Field(...)
    diagrams: Diagrams = Field(...)
    recommended_pilot: RecommendedPilot = Field(...)
    implementation_phases: List[ImplementationPhase] = Field(...)
    next_steps: NextSteps = Field(...)
    executive_summary: str = Field(...)

    def recommendations_in(self, *layers: ArchitectureLayer) -> List[Recommendation]:
        """Return recommendations tagged with any of the given layers, in ranked order."""
        wanted = {layer.value for layer in layers}
        return [r for r in self.top_recommendations if r.architecture_layer in wanted]
