"""Agents for the Cloud Strategy Analyst."""

from .base_agent import BaseAgent, AgentResult, TokenUsage
from .prompts import build_strategy_prompt, ROLE_STATEMENT, STRATEGIC_REQUIREMENTS
from .samples import CLAIMS_SYSTEM_TRANSCRIPT
from .strategy_agent import StrategyAgent

__all__ = [
    "BaseAgent",
    "AgentResult",
    "TokenUsage",
    "build_strategy_prompt",
    "ROLE_STATEMENT",
    "STRATEGIC_REQUIREMENTS",
    "CLAIMS_SYSTEM_TRANSCRIPT",
    "StrategyAgent",
]
