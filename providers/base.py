"""Base LLM provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class LLMResponse:
    """Standardized response from any LLM provider."""
    content: str
    input_tokens: int
    output_tokens: int
    model: str
    provider: str
    cost: float = 0.0


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    A provider makes exactly one outbound call per ``generate``. It does not
    retry and does not cache.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (gemini, openai, anthropic, litellm)."""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Default model for this provider."""
        pass

    @abstractmethod
    def generate(
        self,
        prompt: str,
        response_schema: Dict[str, Any],
        model: Optional[str] = None,
        max_tokens: int = 16384,
    ) -> LLMResponse:
        """Generate a structured completion.

        Args:
            prompt: Full instruction text, sent as a single user message
            response_schema: Gemini-dialect schema the output must follow
            model: Model to use (defaults to provider's default)
            max_tokens: Maximum tokens in response

        Returns:
            LLMResponse whose content is the JSON document as text
        """
        pass

    def is_available(self) -> bool:
        """Check if this provider is available (API key set, etc.)."""
        return True
