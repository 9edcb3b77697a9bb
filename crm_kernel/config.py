"""Runtime configuration, read from CRM_* environment variables or a .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class CRMSettings(BaseSettings):
    seed_sample_data: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CRM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> CRMSettings:
    return CRMSettings()
