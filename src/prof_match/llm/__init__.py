"""LLM provider abstraction."""

from prof_match.llm.base import LLMProvider, get_llm_provider

__all__ = ["LLMProvider", "get_llm_provider"]
