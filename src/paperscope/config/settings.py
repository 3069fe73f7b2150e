"""Configuration management using pydantic-settings.

Supports environment variables and .env file loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "paperscope"
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # arXiv export API
    arxiv_api_url: str = Field(
        default="http://export.arxiv.org/api/query",
        description="arXiv export API query endpoint",
    )
    arxiv_timeout: int = Field(default=30, ge=1, description="Request timeout in seconds")
    arxiv_user_agent: str = "Paperscope/1.0 (arXiv search client)"
    default_max_results: int = Field(
        default=5,
        ge=1,
        le=2000,
        description="Results per search when the caller gives no limit",
    )


settings = Settings()
