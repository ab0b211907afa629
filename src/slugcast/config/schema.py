"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field, SecretStr

from slugcast.slug import DEFAULT_BASE_URL

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
CompletionProvider = Literal["claude", "workers-ai"]


class CloudflareCredentials(BaseModel):
    """The three secrets needed to reach the podcast database and Workers AI."""

    account_id: SecretStr | None = None
    database_id: SecretStr | None = None
    api_token: SecretStr | None = None

    @property
    def is_complete(self) -> bool:
        """True only when all three secrets carry a non-blank value."""
        return all(
            secret is not None and secret.get_secret_value().strip()
            for secret in (self.account_id, self.database_id, self.api_token)
        )

    def merged_over(self, fallback: "CloudflareCredentials") -> "CloudflareCredentials":
        """Fill unset fields from ``fallback``."""
        return CloudflareCredentials(
            account_id=self.account_id or fallback.account_id,
            database_id=self.database_id or fallback.database_id,
            api_token=self.api_token or fallback.api_token,
        )


class CompletionConfig(BaseModel):
    """Text-completion service configuration."""

    provider: CompletionProvider = "claude"
    claude_model: str = "claude-sonnet-4-5"
    workers_ai_model: str = "@cf/meta/llama-3.1-8b-instruct"
    anthropic_api_key: str | None = None  # If None, will use environment variable
    max_tokens: int = Field(default=400, gt=0)
    temperature: float = Field(default=0.7, ge=0.0, le=1.0)


class SlugConfig(BaseModel):
    """Slug derivation settings."""

    use_llm: bool = True  # Ask the completion service first, fall back to derivation
    descriptor_mode: Literal["random", "stable"] = "random"


class StoreConfig(BaseModel):
    """Cloudflare REST API settings."""

    api_base: str = "https://api.cloudflare.com/client/v4"
    timeout_seconds: float = Field(default=30.0, gt=0)


class RecommendationConfig(BaseModel):
    """Workers AI recommendation settings."""

    model: str = "@cf/meta/llama-3.1-8b-instruct"
    history_limit: int = Field(default=50, ge=1, le=1000)


class GlobalConfig(BaseModel):
    """Global slugcast configuration."""

    version: str = "1"
    log_level: LogLevel = "WARNING"
    base_url: str = DEFAULT_BASE_URL
    list_limit: int = Field(default=10, ge=1, le=1000)

    completion: CompletionConfig = Field(default_factory=CompletionConfig)
    slug: SlugConfig = Field(default_factory=SlugConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    recommendation: RecommendationConfig = Field(default_factory=RecommendationConfig)
