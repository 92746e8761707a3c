from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    llm_provider: str = "anthropic"  # anthropic | openai | custom

    # Anthropic
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-opus-4-6"

    # OpenAI / custom (any OpenAI-compatible endpoint)
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    openai_base_url: str = "https://api.openai.com/v1"

    # Cooldown between AI commands of the same category, shared by every visitor.
    # Overrides are keyed by category, e.g. AI_COOLDOWN_OVERRIDES='{"ask": 20}'
    ai_cooldown_seconds: float = Field(default=10, gt=0)
    ai_cooldown_overrides: dict[str, float] = Field(default_factory=dict)

    # HTTP server
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


settings = Settings()
