"""Anthropic Claude LLM provider."""

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel

from prof_match.llm.base import LLMProvider


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider."""

    def _create_chat_model(self) -> BaseChatModel:
        return ChatAnthropic(
            model=self.model,
            api_key=self.api_key,
            timeout=self.timeout,
            max_retries=self.max_retries,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
