"""Application configuration models."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Iterable, Literal

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    app_name: str = Field(default="CineVault", alias="APP_NAME")
    server_host: str = Field(default="0.0.0.0", alias="HOST")
    server_port: int = Field(default=3000, alias="PORT")

    tmdb_api_key: str | None = Field(default=None, alias="TMDB_API_KEY")
    tmdb_api_url: HttpUrl = Field(
        default="https://api.themoviedb.org/3", alias="TMDB_API_URL"
    )
    tmdb_image_url: str = Field(
        default="https://image.tmdb.org/t/p/w500", alias="TMDB_IMAGE_URL"
    )

    openrouter_api_key: str | None = Field(
        default=None, alias="OPENROUTER_API_KEY"
    )
    openrouter_model: str = Field(
        default="google/gemini-2.5-flash-lite", alias="OPENROUTER_MODEL"
    )
    openrouter_api_url: HttpUrl = Field(
        default="https://openrouter.ai/api/v1", alias="OPENROUTER_API_URL"
    )

    admin_user_ids: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(), alias="ADMIN_USER_IDS"
    )

    tier_limit: int = Field(default=30, alias="TIER_LIMIT", ge=1, le=100)
    tier_film_limit: int = Field(default=6, alias="TIER_FILM_LIMIT", ge=1, le=50)
    default_runtime_minutes: int = Field(
        default=120, alias="DEFAULT_RUNTIME_MINUTES", ge=1
    )
    search_debounce_seconds: float = Field(
        default=0.3, alias="SEARCH_DEBOUNCE_SECONDS", ge=0
    )

    sync_retry_limit: int = Field(default=2, alias="SYNC_RETRY_LIMIT", ge=0, le=10)
    sync_retry_base_delay: float = Field(
        default=0.5, alias="SYNC_RETRY_BASE_DELAY", ge=0
    )
    sync_retry_max_delay: float = Field(
        default=5.0, alias="SYNC_RETRY_MAX_DELAY", ge=0
    )

    database_url: str = Field(
        default="sqlite+aiosqlite:///./cinevault.db", alias="DATABASE_URL"
    )

    environment: Literal["development", "production"] = Field(
        default="development", alias="ENVIRONMENT"
    )

    @field_validator("admin_user_ids", mode="before")
    @classmethod
    def _parse_admin_user_ids(cls, value: object) -> tuple[str, ...]:
        """Normalise privileged editor ids from environment values."""

        if value is None:
            return ()
        if isinstance(value, str):
            raw_values = [part.strip() for part in value.split(",")]
        elif isinstance(value, Iterable):
            raw_values = [str(part).strip() for part in value]
        else:
            raise TypeError("ADMIN_USER_IDS must be a string or iterable of strings")

        cleaned: list[str] = []
        for entry in raw_values:
            if entry and entry not in cleaned:
                cleaned.append(entry)
        return tuple(cleaned)

    def is_admin(self, user_id: str | None) -> bool:
        """Return whether the user holds the privileged editor flag."""

        return bool(user_id) and user_id in self.admin_user_ids

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()  # type: ignore[call-arg]


settings = get_settings()
