"""Factory for creating LLM providers.

Credentials come from the Settings object passed in, which is built once at
startup. Providers never read the environment while handling a request.
"""

from typing import Optional, Dict, Type

from config import Settings, settings as default_settings
from exceptions import ConfigurationError

from .base import LLMProvider
from .anthropic_provider import AnthropicProvider
from .gemini_provider import GeminiProvider
from .litellm_provider import LiteLLMProvider
from .openai_provider import OpenAIProvider


# Registry of providers that take an explicit API key
PROVIDERS: Dict[str, Type[LLMProvider]] = {
    "gemini": GeminiProvider,
    "google": GeminiProvider,
    "openai": OpenAIProvider,
    "gpt": OpenAIProvider,
    "anthropic": AnthropicProvider,
    "claude": AnthropicProvider,
}

ALIASES = {"google": "gemini", "gpt": "openai", "claude": "anthropic"}

# Model to provider mapping for auto-detection
MODEL_PROVIDERS: Dict[str, str] = {
    "gemini": "gemini",
    "gpt-": "openai",
    "o1": "openai",
    "o3": "openai",
    "claude": "anthropic",
    "sonnet": "anthropic",
    "opus": "anthropic",
    "haiku": "anthropic",
}


def _detect_provider(model: str) -> Optional[str]:
    model_lower = model.lower()
    if "/" in model_lower:
        # provider/model strings are LiteLLM's convention
        return "litellm"
    for prefix, provider in MODEL_PROVIDERS.items():
        if model_lower.startswith(prefix):
            return provider
    return None


def get_provider(
    provider_name: Optional[str] = None,
    model: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> LLMProvider:
    """Get an LLM provider instance.

    Args:
        provider_name: Explicit provider name (gemini, openai, anthropic, litellm)
        model: Model name - if provided without provider, will auto-detect provider
        settings: Settings holding credentials; the module singleton if omitted

    Returns:
        LLMProvider instance

    Raises:
        ValueError: Unknown provider name
        ConfigurationError: The provider's API key is not configured

    Examples:
        get_provider("gemini")
        get_provider(model="gpt-4o")            # OpenAI provider
        get_provider(model="gemini/gemini-2.5-pro")  # LiteLLM provider
        get_provider()                          # settings.default_provider
    """
    settings = settings or default_settings

    if provider_name:
        provider_key = provider_name.lower()
    elif model:
        provider_key = _detect_provider(model) or settings.default_provider
    else:
        provider_key = settings.default_provider
    provider_key = ALIASES.get(provider_key, provider_key)

    # Only the default provider inherits the default model
    if model is None and provider_key == settings.default_provider:
        model = settings.default_model

    if provider_key == "litellm":
        if not model:
            raise ConfigurationError("The litellm provider needs a model, e.g. --model gemini/gemini-2.5-pro")
        return LiteLLMProvider(default_model=model)

    if provider_key not in PROVIDERS:
        raise ValueError(
            f"Unknown provider: {provider_name}. "
            f"Available: {list(PROVIDERS.keys()) + ['litellm']}"
        )

    api_key = settings.require_api_key(provider_key)
    return PROVIDERS[provider_key](
        api_key=api_key,
        default_model=model,
        timeout_seconds=settings.api_timeout_seconds,
    )


def list_providers(settings: Optional[Settings] = None) -> Dict[str, bool]:
    """List all providers and whether their credentials are configured.

    Returns:
        Dict mapping provider name to availability status
    """
    settings = settings or default_settings
    result = {}
    for name in PROVIDERS:
        # Skip aliases
        if name in ALIASES:
            continue
        result[name] = bool(settings.api_key_for(name).strip())
    # LiteLLM resolves credentials per backend at call time
    result["litellm"] = True
    return result
