from ai.llm.base import LLMClient, LLMResponse
from ai.llm.factory import generate_text, get_llm_client

__all__ = ["LLMClient", "LLMResponse", "generate_text", "get_llm_client"]
