"""Google Gemini LLM provider."""

import os

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from prof_match.llm.base import LLMProvider


class GoogleProvider(LLMProvider):
    """Google Gemini provider using langchain-google-genai."""

    def _create_chat_model(self) -> BaseChatModel:
        return ChatGoogleGenerativeAI(
            model=self.model,
            google_api_key=self.api_key or os.getenv("GOOGLE_API_KEY"),
            timeout=self.timeout,
            max_retries=self.max_retries,
            max_output_tokens=self.max_tokens,
            temperature=self.temperature,
        )
