"""Anthropic (Claude) provider implementation."""

import json
import logging
from typing import Any, Dict, Optional

from contracts.schema import to_json_schema

from .base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class AnthropicProvider(LLMProvider):
    """Provider for Anthropic Claude models.

    Structured output is obtained by forcing a single tool call whose input
    schema is the response schema; the tool input is returned as JSON text.
    """

    MODELS = {
        "claude-sonnet": "claude-sonnet-4-20250514",
        "claude-opus": "claude-opus-4-20250514",
        "claude-haiku": "claude-3-5-haiku-20241022",
        "sonnet": "claude-sonnet-4-20250514",
        "opus": "claude-opus-4-20250514",
        "haiku": "claude-3-5-haiku-20241022",
    }

    TOOL_NAME = "record_strategy"

    def __init__(
        self,
        api_key: str,
        default_model: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
    ):
        """Initialize Anthropic provider.

        Args:
            api_key: Anthropic API key, read once from Settings at startup.
            default_model: Model used when generate() is not given one.
            timeout_seconds: Optional HTTP timeout; None uses the SDK default.
        """
        self.api_key = api_key
        self._default_model = default_model or "claude-sonnet-4-20250514"
        self.timeout_seconds = timeout_seconds
        self._client = None

    @property
    def name(self) -> str:
        return "anthropic"

    @property
    def default_model(self) -> str:
        return self._default_model

    def _get_client(self):
        if self._client is None:
            from anthropic import Anthropic
            kwargs = {"api_key": self.api_key, "max_retries": 0}
            if self.timeout_seconds:
                kwargs["timeout"] = float(self.timeout_seconds)
            self._client = Anthropic(**kwargs)
        return self._client

    def _resolve_model(self, model: Optional[str]) -> str:
        """Resolve model alias to full model name."""
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
        logger.debug("Calling Anthropic model %s (%d prompt chars)", resolved_model, len(prompt))

        response = client.messages.create(
            model=resolved_model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
            tools=[{
                "name": self.TOOL_NAME,
                "description": "Record the complete cloud modernization strategy.",
                "input_schema": to_json_schema(response_schema),
            }],
            tool_choice={"type": "tool", "name": self.TOOL_NAME},
        )

        # Forced tool choice yields one tool_use block; fall back to any text block
        content = ""
        for block in response.content:
            if block.type == "tool_use":
                content = json.dumps(block.input)
                break
            if block.type == "text" and not content:
                content = block.text

        return LLMResponse(
            content=content,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            model=resolved_model,
            provider=self.name,
        )

    def is_available(self) -> bool:
        return bool(self.api_key)
