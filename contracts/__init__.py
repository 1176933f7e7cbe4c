"""Pydantic contracts for the Cloud Strategy Analyst.

The model's structured output is typed through these contracts, and the
response schema sent to the model lives beside them.
"""

from .strategy_contracts import (
    ArchitectureLayer,
    UseCaseFormat,
    ClientSnapshot,
    Recommendation,
    MatchedUseCase,
    Diagrams,
    RecommendedPilot,
    ImplementationPhase,
    NextSteps,
    AnalysisResult,
)

from .schema import (
    ANALYSIS_RESULT_SCHEMA,
    to_json_schema,
    schema_tree,
    model_tree,
    required_paths,
    model_required_paths,
)

__all__ = [
    # Strategy
    "ArchitectureLayer",
    "UseCaseFormat",
    "ClientSnapshot",
    "Recommendation",
    "MatchedUseCase",
    "Diagrams",
    "RecommendedPilot",
    "ImplementationPhase",
    "NextSteps",
    "AnalysisResult",
    # Schema
    "ANALYSIS_RESULT_SCHEMA",
    "to_json_schema",
    "schema_tree",
    "model_tree",
    "required_paths",
    "model_required_paths",
]
