"""Google Gemini provider implementation."""

import logging
from typing import Any, Dict, Optional

from .base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Provider for Google Gemini models, using native structured output."""

    MODELS = {
        "gemini-pro": "gemini-2.5-pro",
        "gemini-flash": "gemini-2.5-flash",
        "gemini-3-pro": "gemini-3.1-pro-preview",
    }

    def __init__(
        self,
        api_key: str,
        default_model: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google API key, read once from Settings at startup.
            default_model: Model used when generate() is not given one.
            timeout_seconds: Optional HTTP timeout; None waits for the endpoint.
        """
        self.api_key = api_key
        self._default_model = default_model or "gemini-3.1-pro-preview"
        self.timeout_seconds = timeout_seconds
        self._client = None

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def default_model(self) -> str:
        return self._default_model

    def _get_client(self):
        if self._client is None:
            from google import genai
            from google.genai import types

            http_options = None
            if self.timeout_seconds:
                http_options = types.HttpOptions(timeout=self.timeout_seconds * 1000)
            self._client = genai.Client(api_key=self.api_key, http_options=http_options)
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
        from google.genai import types

        client = self._get_client()
        resolved_model = self._resolve_model(model)
        logger.debug("Calling Gemini model %s (%d prompt chars)", resolved_model, len(prompt))

        response = client.models.generate_content(
            model=resolved_model,
            contents=[
                types.Content(role="user", parts=[types.Part(text=prompt)]),
            ],
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=response_schema,
                max_output_tokens=max_tokens,
            ),
        )

        text = response.text or ""
        usage = getattr(response, "usage_metadata", None)
        input_tokens = getattr(usage, "prompt_token_count", None) or len(prompt) // 4
        output_tokens = getattr(usage, "candidates_token_count", None) or len(text) // 4

        return LLMResponse(
            content=text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=resolved_model,
            provider=self.name,
        )

    def is_available(self) -> bool:
        return bool(self.api_key)
