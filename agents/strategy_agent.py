"""Strategy Agent - The Cloud Architect.

Turns a discovery call transcript into a cloud modernization strategy:
client snapshot, ranked recommendations with pricing, matched use cases,
diagrams, a pilot, a phased roadmap and next steps.
"""

from typing import Optional

from agents.base_agent import AgentResult, BaseAgent
from agents.prompts import build_strategy_prompt
from config import Settings
from contracts import ANALYSIS_RESULT_SCHEMA, AnalysisResult
from providers import LLMProvider


class StrategyAgent(BaseAgent[AnalysisResult]):
    """The Cloud Architect - one structured call per transcript.

    Each call goes to the model; nothing is cached, so analysing the same
    transcript twice makes two calls.
    """

    def __init__(
        self,
        llm_provider: LLMProvider,
        model: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the Strategy Agent."""
        super().__init__(
            role="strategy",
            output_schema=AnalysisResult,
            response_schema=ANALYSIS_RESULT_SCHEMA,
            llm_provider=llm_provider,
            model=model,
            settings=settings,
        )

    def get_task_description(self) -> str:
        return "Produce a cloud modernization strategy from a discovery transcript"

    def run_transcript(self, transcript: str) -> AgentResult:
        """Analyze a transcript and return the result with call metadata."""
        return self.run(build_strategy_prompt(transcript))

    def analyze(self, transcript: str) -> AnalysisResult:
        """Convenience method for running the strategy analysis.

        Args:
            transcript: The discovery call transcript

        Returns:
            AnalysisResult validated against the contract

        Raises:
            EmptyTranscriptError: transcript is empty or whitespace-only
            AnalysisError: the call failed or the response was not a valid document
        """
        return self.run_transcript(transcript).output
