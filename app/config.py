from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: str = Field(default="production", alias="APP_ENV")

    # Gemini (Google Generative AI)
    google_generative_ai_api_key: str | None = Field(
        default=None, alias="GOOGLE_GENERATIVE_AI_API_KEY"
    )
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        alias="GEMINI_BASE_URL",
    )
    llm_timeout: int = Field(default=30, alias="LLM_TIMEOUT")

    @property
    def is_development(self: "Settings") -> bool:
        return self.app_env.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
