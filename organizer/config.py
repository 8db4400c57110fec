"""Store Configuration — settings read from the environment or a .env file.

Invariants:
    - Connection credentials only ever arrive through the environment
    - database_url always names an async driver (postgres schemes map to asyncpg)
    - get_settings() returns one cached Settings per process

Design Decisions:
    - pydantic-settings: env parsing and type coercion in one declaration
    - Every field has a default so a local docker-compose database needs no setup
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from organizer.core.validation import UID_PATTERN

_ASYNC_SCHEMES = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Connection
    database_url: str = (
        "postgresql+asyncpg://organizer:organizer@db:5432/organizer"
    )
    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False

    # Identifiers
    uid_pattern: str = UID_PATTERN

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        if isinstance(v, str):
            for plain, async_scheme in _ASYNC_SCHEMES.items():
                if v.startswith(plain):
                    return async_scheme + v[len(plain):]
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
