"""
music_catalog.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the service and API layers.
- Hide secrets from repr/logging (JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MUSIC_CATALOG_", case_sensitive=False)

    # `prod` disables the /v1/dev setup endpoints.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "music-catalog"
    log_level: str = "INFO"
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Session tokens
    token_scheme: Literal["uuid", "jwt"] = "uuid"
    jwt_alg: str = "HS256"
    jwt_issuer: str = "music-catalog"
    jwt_secret: str = Field(default="dev-secret-change-me-0123456789abcdef", repr=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests build `Settings(...)` directly instead of going through the cached instance.
