from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app_name: str = Field(default="Gemini Proxy", alias="APP_NAME")
    environment: Literal["local", "dev", "staging", "prod"] = Field(
        default="local", alias="ENVIRONMENT"
    )
    # Unset means "derive from ENVIRONMENT", see resolved_log_level.
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    # May be missing: the server still starts, every proxy call then fails.
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    gemini_model: str = Field(
        default="gemini-2.5-flash-preview-09-2025", alias="GEMINI_MODEL"
    )
    gemini_temperature: float = Field(
        default=0.8, ge=0.0, le=2.0, alias="GEMINI_TEMPERATURE"
    )

    # Replace "*" with the deployed client origin in production.
    cors_allow_origin: str = Field(default="*", alias="CORS_ALLOW_ORIGIN")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    @property
    def resolved_log_level(self) -> str:
        if self.log_level:
            return self.log_level.upper()
        return "WARNING" if self.environment == "prod" else "INFO"

    @property
    def is_configured(self) -> bool:
        return bool(self.gemini_api_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
