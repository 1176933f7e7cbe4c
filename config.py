"""Configuration settings for the Cloud Strategy Analyst."""

# Load .env into os.environ so the plain GEMINI_API_KEY / OPENAI_API_KEY names work
from dotenv import load_dotenv

load_dotenv()

from typing import Dict, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from exceptions import ConfigurationError


# Environment variables accepted for each provider's credential
PROVIDER_KEY_ENV_VARS: Dict[str, tuple] = {
    "gemini": ("STRATEGY_ANALYST_GEMINI_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "openai": ("STRATEGY_ANALYST_OPENAI_API_KEY", "OPENAI_API_KEY"),
    "anthropic": ("STRATEGY_ANALYST_ANTHROPIC_API_KEY", "ANTHROPIC_API_KEY"),
}


class Settings(BaseSettings):
    """Global settings for the analyst.

    Settings can be overridden via environment variables with STRATEGY_ANALYST_ prefix.
    Example: STRATEGY_ANALYST_DEFAULT_MODEL=gemini-2.5-pro
    """

    # Model config
    default_provider: str = Field(
        default="gemini",
        description="Provider used when none is given on the command line"
    )
    default_model: str = Field(
        default="gemini-3.1-pro-preview",
        description="Model used for the strategy analysis call"
    )
    max_tokens_per_agent_call: int = Field(
        default=16384,
        description="Maximum output tokens for the analysis call"
    )

    # API settings
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(*PROVIDER_KEY_ENV_VARS["gemini"]),
        description="Google Gemini API key",
    )
    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(*PROVIDER_KEY_ENV_VARS["openai"]),
        description="OpenAI API key",
    )
    anthropic_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(*PROVIDER_KEY_ENV_VARS["anthropic"]),
        description="Anthropic API key",
    )
    api_timeout_seconds: Optional[int] = Field(
        default=None,
        description="API call timeout in seconds; unset means wait for the endpoint"
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI"
    )

    model_config = {
        "env_prefix": "STRATEGY_ANALYST_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    def api_key_for(self, provider: str) -> str:
        """Return the configured credential for a provider ('' when unset)."""
        return getattr(self, f"{provider.lower()}_api_key", "") or ""

    def require_api_key(self, provider: str) -> str:
        """Return the provider credential or raise ConfigurationError naming the env vars."""
        key = self.api_key_for(provider).strip()
        if not key:
            env_vars = PROVIDER_KEY_ENV_VARS.get(provider.lower(), ())
            hint = f" Set one of: {', '.join(env_vars)}." if env_vars else ""
            raise ConfigurationError(f"No API key configured for provider '{provider}'.{hint}")
        return key


# Create singleton instance
settings = Settings()
