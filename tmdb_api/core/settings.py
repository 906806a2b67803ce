from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"


class Settings(BaseSettings):
    TMDB_API_KEY: str | None = None
    TMDB_BEARER_TOKEN: str | None = None
    TMDB_BASE_URL: str = DEFAULT_BASE_URL
    TMDB_TIMEOUT_SECONDS: float = 15.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("TMDB_API_KEY", "TMDB_BEARER_TOKEN")
    @classmethod
    def blank_as_missing(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("TMDB_BASE_URL")
    @classmethod
    def validate_base_url(cls, v):
        if not v or not v.startswith(("http://", "https://")):
            raise ValueError("TMDB_BASE_URL must be an http:// or https:// URL")
        return v.rstrip("/")

    @field_validator("TMDB_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("TMDB_TIMEOUT_SECONDS must be positive")
        return v


def get_settings() -> Settings:
    return Settings()
