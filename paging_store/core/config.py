from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_TYPES = ("local", "session", "memory")


def _parse_storage_backend(v: Any) -> str:
    s = str(v or "").strip().lower()
    return s if s in STORAGE_TYPES else "session"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    debug: bool = Field(default=False, alias="DEBUG")

    # Paging
    default_limit: int = Field(default=10, alias="PAGING_DEFAULT_LIMIT")

    # Storage: local | session | memory
    storage_backend: str = Field(default="session", alias="PAGING_STORAGE_BACKEND")
    storage_local_path: str = Field(default="./.paging", alias="PAGING_STORAGE_PATH")

    @field_validator("storage_backend", mode="before")
    @classmethod
    def _storage_backend(cls, v: Any) -> str:
        return _parse_storage_backend(v)


@lru_cache
def get_settings() -> Settings:
    return Settings()
