"""Demo settings read from READGRAPH_* environment variables."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="READGRAPH_", env_file=".env", case_sensitive=False
    )

    default_k_neighbours: int = 2

    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("default_k_neighbours")
    @classmethod
    def check_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("default_k_neighbours must be >= 0")
        return v

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
