"""Environment configuration for EmotiBot Chat."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    api_key: str | None = Field(
        None, description="Credential for the text-completion service"
    )
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-4o-mini"
    remote_timeout: float = Field(5.0, gt=0, description="Seconds per remote call")

    log_level: str = "INFO"
    env: str = "dev"

    model_config = SettingsConfigDict(
        env_prefix="EMOTIBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_prod(self) -> bool:
        return self.env.lower() == "prod"


@lru_cache
def get_settings() -> Settings:
    """Settings resolved once per process."""
    return Settings()
