"""Base LLM provider abstraction."""

from abc import ABC, abstractmethod
from typing import Literal

from langchain_core.language_models import BaseChatModel

ProviderName = Literal["openai", "anthropic", "google"]

DEFAULT_MODELS: dict[str, str] = {
    "openai": "gpt-4o-mini",
    "anthropic": "claude-sonnet-4-5-20250929",
    "google": "gemini-2.5-flash",
}

# Narratives are short; a slow reply should fall back rather than hold the request
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 1
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    The chat model is created on first access and reused afterwards.
    """

    def __init__(
        self,
        model: str,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self.max_retries = max_retries
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._chat_model: BaseChatModel | None = None

    def get_chat_model(self) -> BaseChatModel:
        """Get a cached chat model instance."""
        if self._chat_model is None:
            self._chat_model = self._create_chat_model()
        return self._chat_model

    @abstractmethod
    def _create_chat_model(self) -> BaseChatModel:
        """Create a new chat model instance. Override in subclasses."""


def get_llm_provider(
    provider: ProviderName,
    model: str | None = None,
    api_key: str | None = None,
    **options: float | int,
) -> LLMProvider:
    """Factory function to get an LLM provider instance.

    Args:
        provider: Provider name.
        model: Model ID, defaults to the provider's entry in DEFAULT_MODELS.
        api_key: API key, or None to let the client read its env var.
        **options: timeout, max_retries, max_tokens, temperature.
    """
    if provider == "openai":
        from prof_match.llm.openai import OpenAIProvider

        return OpenAIProvider(model=model or DEFAULT_MODELS["openai"], api_key=api_key, **options)
    elif provider == "anthropic":
        from prof_match.llm.anthropic import AnthropicProvider

        return AnthropicProvider(
            model=model or DEFAULT_MODELS["anthropic"], api_key=api_key, **options
        )
    elif provider == "google":
        from prof_match.llm.google import GoogleProvider

        return GoogleProvider(model=model or DEFAULT_MODELS["google"], api_key=api_key, **options)
    else:
        raise ValueError(f"Unknown provider: {provider}")
