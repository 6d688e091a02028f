"""Configuration management for BrandPulse."""

from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import ErrorConstants, PromptConstants
from .exceptions import ConfigError


class Settings(BaseSettings):
    """Application settings."""

    # Firecrawl API
    firecrawl_api_key: str = Field("", description="Firecrawl API key")
    firecrawl_api_url: str = Field("https://api.firecrawl.dev/v1/scrape", description="Firecrawl scrape endpoint")

    # Reddit
    reddit_user_agent: str = Field("sentiment-poc/0.1", description="User agent for Reddit JSON requests")

    # LLM
    llm_provider: str = Field("anthropic", description="Completion provider: anthropic or openai")
    llm_model: str = Field(PromptConstants.DEFAULT_MODEL, description="Model identifier")
    llm_max_tokens: int = Field(PromptConstants.MAX_TOKENS, description="Max tokens for the analysis response")
    anthropic_api_key: str = Field("", description="Anthropic API key")
    openai_api_key: str = Field("", description="OpenAI API key")

    # Network
    request_timeout: float = Field(ErrorConstants.REQUEST_TIMEOUT, description="HTTP timeout in seconds")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    @property
    def effective_llm_key(self) -> str:
        """Get the API key for the configured completion provider."""
        if self.llm_provider.lower() == "openai":
            return self.openai_api_key
        return self.anthropic_api_key

    def require_credentials(self) -> None:
        """Fail fast when a credential the pipeline needs is missing."""
        missing = []
        if not self.firecrawl_api_key:
            missing.append("FIRECRAWL_API_KEY")
        if not self.effective_llm_key:
            missing.append(f"{self.llm_provider.upper()}_API_KEY")
        if missing:
            raise ConfigError(f"Missing env vars: {', '.join(missing)}. Check your .env file.")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
