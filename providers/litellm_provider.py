"""LiteLLM-backed provider. Reaches any backend LiteLLM supports with one call shape."""

import logging
from typing import Any, Dict, Optional

from contracts.schema import to_json_schema

from .base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


# LiteLLM model strings: provider/model-name (OpenAI can omit prefix)
MODEL_ALIASES = {
    "gemini-2.5-pro": "gemini/gemini-2.5-pro",
    "gemini-2.5-flash": "gemini/gemini-2.5-flash",
    "claude-sonnet": "anthropic/claude-sonnet-4-20250514",
    "claude-haiku": "anthropic/claude-3-5-haiku-20241022",
    "deepseek-chat": "deepseek/deepseek-chat",
}


def _to_litellm_model(model: Optional[str], default: str) -> str:
    """Map a short alias to a LiteLLM model string; unknown names pass through."""
    if not model:
        return default
    return MODEL_ALIASES.get(model.lower(), model)


class LiteLLMProvider(LLMProvider):
    """Single provider that delegates to litellm.completion().

    LiteLLM reads backend credentials from the environment itself.
    """

    def __init__(self, default_model: str, metadata: Optional[dict] = None):
        """Initialize with the LiteLLM model string to use by default.

        Args:
            default_model: LiteLLM model string (e.g. gpt-4o-mini, gemini/gemini-2.5-pro).
            metadata: Optional dict passed to litellm for callbacks.
        """
        self._default_model = _to_litellm_model(default_model, default_model)
        self._metadata = metadata or {}

    @property
    def name(self) -> str:
        return "litellm"

    @property
    def default_model(self) -> str:
        return self._default_model

    def generate(
        self,
        prompt: str,
        response_schema: Dict[str, Any],
        model: Optional[str] = None,
        max_tokens: int = 16384,
    ) -> LLMResponse:
        import litellm

        resolved_model = _to_litellm_model(model, self._default_model)
        logger.debug("Calling LiteLLM model %s (%d prompt chars)", resolved_model, len(prompt))
        response = litellm.completion(
            model=resolved_model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": "analysis_result",
                    "schema": to_json_schema(response_schema),
                    "strict": True,
                },
            },
            num_retries=0,
            metadata={**self._metadata},
        )

        content = response.choices[0].message.content or ""
        usage = getattr(response, "usage", None)
        input_tokens = getattr(usage, "prompt_tokens", 0) or 0
        output_tokens = getattr(usage, "completion_tokens", 0) or 0
        hidden = getattr(response, "_hidden_params", None) or {}
        cost = float(hidden.get("response_cost", 0) or 0)
        model_id = getattr(response, "model", None) or resolved_model

        return LLMResponse(
            content=content,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=model_id,
            provider=self.name,
            cost=cost,
        )

    def is_available(self) -> bool:
        """LiteLLM reads API keys from env; we consider it available if the model is set."""
        return bool(self._default_model)
