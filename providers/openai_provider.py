"""OpenAI provider implementation."""

import logging
from typing import Any, Dict, Optional

from contracts.schema import to_json_schema

from .base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """Provider for OpenAI models, using strict JSON-schema structured outputs."""

    MODELS = {
        "gpt-4o": "gpt-4o",
        "gpt-4o-mini": "gpt-4o-mini",
        "gpt-4.1": "gpt-4.1",
        "gpt-4.1-mini": "gpt-4.1-mini",
    }

    SCHEMA_NAME = "analysis_result"

    def __init__(
        self,
        api_key: str,
        default_model: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key, read once from Settings at startup.
            default_model: Model used when generate() is not given one.
            timeout_seconds: Optional HTTP timeout; None uses the SDK default.
        """
        self.api_key = api_key
        self._default_model = default_model or "gpt-4o"
        self.timeout_seconds = timeout_seconds
        self._client = None

    @property
    def name(self) -> str:
        return "openai"

    @property
    def default_model(self) -> str:
        return self._default_model

    def _get_client(self):
        if self._client is None:
            from openai import OpenAI
            kwargs = {"api_key": self.api_key, "max_retries": 0}
            if self.timeout_seconds:
                kwargs["timeout"] = float(self.timeout_seconds)
            self._client = OpenAI(**kwargs)
        return self._client

    def _resolve_model(self, model: Optional[str]) -> str:
        if model is None:
            return self.default_model
        return self.MODELS.get(model, model)

    def generate(
        self,
        prompt: str,
        response_schema: Dict[str, Any],
        model: Optional[str] = None,
        max_tokens: int = 16384,
    ) -> LLMResponse:
        client = self._get_client()
        resolved_model = self._resolve_model(model)
        logger.debug("Calling OpenAI model %s (%d prompt chars)", resolved_model, len(prompt))

        response = client.chat.completions.create(
            model=resolved_model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": self.SCHEMA_NAME,
                    "schema": to_json_schema(response_schema),
                    "strict": True,
                },
            },
        )

        return LLMResponse(
            content=response.choices[0].message.content or "",
            input_tokens=response.usage.prompt_tokens,
            output_tokens=response.usage.completion_tokens,
            model=resolved_model,
            provider=self.name,
        )

    def is_available(self) -> bool:
        return bool(self.api_key)
