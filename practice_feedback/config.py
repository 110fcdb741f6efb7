"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Tests build Settings(...) directly and hand it to create_app()

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env support
    - Defaults for every non-secret setting: works out of the box locally
    - summary_provider selects the SDK client; both speak the Messages API
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    data_dir: Path = Path("./data")

    # Summary generation
    summary_provider: Literal["anthropic", "bedrock"] = "anthropic"
    anthropic_api_key: str = "sk-ant-placeholder"
    anthropic_timeout_seconds: float | None = None
    aws_region: str = "us-east-1"
    summary_model: str = "claude-haiku-4-5"
    summary_max_tokens: int = 1000
    summary_temperature: float = 0.3
    # Sent only when set: newer models reject temperature and top_p together
    summary_top_p: float | None = None

    @field_validator("summary_provider", mode="before")
    @classmethod
    def normalize_provider(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
