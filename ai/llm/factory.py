import logging

from ai.errors import MissingConfigError, ProviderError
from ai.llm.base import LLMClient

logger = logging.getLogger(__name__)


def get_llm_client(settings=None) -> LLMClient:
    """Build the configured provider client.

    Raises MissingConfigError when the provider's credentials are empty, so
    static commands keep working on a deployment without AI configured.
    """
    if settings is None:
        from config import settings

    provider = settings.llm_provider.lower()

    if provider == "anthropic":
        if not settings.anthropic_api_key:
            raise MissingConfigError("ANTHROPIC_API_KEY")
        from ai.llm.anthropic_client import AnthropicClient
        return AnthropicClient(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
        )

    if provider == "openai":
        if not settings.openai_api_key:
            raise MissingConfigError("OPENAI_API_KEY")
        from ai.llm.openai_client import OpenAIClient
        return OpenAIClient(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url or None,
        )

    if provider == "custom":
        # Self-hosted OpenAI-compatible servers often accept any key.
        if not settings.openai_base_url:
            raise MissingConfigError("OPENAI_BASE_URL")
        from ai.llm.openai_client import OpenAIClient
        return OpenAIClient(
            api_key=settings.openai_api_key or "not-needed",
            model=settings.openai_model,
            base_url=settings.openai_base_url,
        )

    raise MissingConfigError(f"a supported LLM_PROVIDER (got {provider!r})")


async def generate_text(llm: LLMClient, system_prompt: str, user_prompt: str, max_tokens: int = 1024) -> str:
    """Single opaque call to the provider; returns the complete response text."""
    response = await llm.complete(system=system_prompt, user=user_prompt, max_tokens=max_tokens)
    if not response.content.strip():
        raise ProviderError(f"Empty response from {response.model or 'provider'}")
    logger.debug("LLM %s used %d tokens", response.model, response.tokens_used)
    return response.content
