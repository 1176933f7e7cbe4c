"""Base agent class for structured-output calls.

Every agent:
- Builds a prompt for its task
- Calls the LLM once with the prompt and the response schema
- Validates output against the expected Pydantic contract
- Tracks token usage
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from config import Settings, settings as default_settings
from exceptions import AnalysisError, SchemaViolationError, TransportError
from providers import LLMProvider

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class TokenUsage(BaseModel):
    """Token usage reported by the provider."""
    input_tokens: int = 0
    output_tokens: int = 0


class AgentResult(BaseModel):
    """Result from an agent run, including output and metadata."""
    output: Any
    token_usage: TokenUsage
    model: str
    provider: str
    raw_response: Optional[str] = None
    cost: float = 0.0


class BaseAgent(ABC, Generic[T]):
    """Base class for structured-output agents.

    Responsibilities:
    - Sends the prompt and response schema to the provider in one call
    - Validates output against the expected Pydantic contract
    - Converts every failure into an AnalysisError subclass

    There is no retry: a failed call or an invalid document fails the run.
    """

    def __init__(
        self,
        role: str,
        output_schema: Type[T],
        response_schema: Dict[str, Any],
        llm_provider: LLMProvider,
        model: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the agent.

        Args:
            role: Agent role, used in log messages
            output_schema: Pydantic model class for validating output
            response_schema: Schema sent to the model to constrain its output
            llm_provider: Provider that performs the outbound call
            model: Override the provider's default model
            settings: Settings for token limits; the module singleton if omitted
        """
        self.role = role
        self.output_schema = output_schema
        self.response_schema = response_schema
        self.llm_provider = llm_provider
        self.model = model or llm_provider.default_model
        self.settings = settings or default_settings

        self.total_usage = TokenUsage()

    @staticmethod
    def _strip_fence(text: str) -> str:
        """Return the body of a Markdown code block (first opening fence to last closing fence)."""
        if "```json" in text:
            start = text.find("```json") + 7
        elif "```" in text:
            start = text.find("```") + 3
        else:
            return text
        end = text.rfind("```", start)
        return (text[start:end] if end != -1 else text[start:]).strip()

    def _parse_and_validate(self, response_text: str) -> T:
        """Parse LLM response and validate against schema.

        Args:
            response_text: Raw text response from LLM

        Returns:
            Validated Pydantic model instance

        Raises:
            ValidationError: If response doesn't match schema
            json.JSONDecodeError: If response isn't valid JSON
        """
        text = (response_text or "").strip()

        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            # String values may hold fenced code, so only unwrap when the plain parse fails
            data = json.loads(self._strip_fence(text))

        return self.output_schema.model_validate(data)

    def run(self, prompt: str, model: Optional[str] = None) -> AgentResult:
        """Execute the agent.

        Args:
            prompt: Full prompt text
            model: Optional model override for this call

        Returns:
            AgentResult with validated output and metadata

        Raises:
            TransportError: The provider call failed
            SchemaViolationError: The response is not a valid document
            ConfigurationError: The provider reported missing configuration
        """
        resolved_model = model or self.model
        logger.debug("%s: calling %s/%s", self.role, self.llm_provider.name, resolved_model)

        try:
            response = self.llm_provider.generate(
                prompt=prompt,
                response_schema=self.response_schema,
                model=resolved_model,
                max_tokens=self.settings.max_tokens_per_agent_call,
            )
        except AnalysisError:
            raise
        except Exception as e:
            logger.error("%s: call to %s failed: %s", self.role, self.llm_provider.name, e)
            raise TransportError(f"{self.llm_provider.name} call failed: {e}") from e

        self.total_usage.input_tokens += response.input_tokens
        self.total_usage.output_tokens += response.output_tokens

        try:
            output = self._parse_and_validate(response.content)
        except json.JSONDecodeError as e:
            logger.warning(
                "%s: response from %s is not JSON (%s); first 200 chars: %r",
                self.role, response.model, e, (response.content or "")[:200],
            )
            raise SchemaViolationError(f"Response is not valid JSON: {e}") from e
        except ValidationError as e:
            logger.warning(
                "%s: response from %s violates the %s contract (%d errors): %s",
                self.role, response.model, self.output_schema.__name__, e.error_count(), e,
            )
            raise SchemaViolationError(
                f"Response does not match {self.output_schema.__name__}: {e.error_count()} errors"
            ) from e

        return AgentResult(
            output=output,
            token_usage=TokenUsage(
                input_tokens=response.input_tokens,
                output_tokens=response.output_tokens,
            ),
            model=response.model,
            provider=response.provider,
            raw_response=response.content,
            cost=response.cost,
        )

    @abstractmethod
    def get_task_description(self) -> str:
        """Return a description of what this agent does.

        Used for logging and debugging.
        """
        pass
