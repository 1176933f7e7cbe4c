"""Orchestrator module: session state for the analyst."""

from .session import (
    GENERIC_ERROR_MESSAGE,
    AnalysisSession,
    SessionState,
    TranscriptAnalyzer,
)

__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "AnalysisSession",
    "SessionState",
    "TranscriptAnalyzer",
]
